"""Text normalizers applied to form input as it is typed."""

import re


def capitalize_first(value: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    if not value:
        return value
    return value[0].upper() + value[1:]


def letters_only(value: str) -> str:
    """Drop everything except ASCII letters and whitespace."""
    return re.sub(r"[^a-zA-Z\s]", "", value)


def upper(value: str) -> str:
    return value.upper()


def digits_only(value: str) -> str:
    """Drop every character that is not a digit."""
    return re.sub(r"\D", "", value)
