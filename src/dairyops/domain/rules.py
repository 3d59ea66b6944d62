"""Composable field validation rules.

A field rule takes the raw draft string and returns an error message, or
None when the value is acceptable. Every rule except ``required`` accepts a
blank value, so optional fields are only checked once they are filled in;
a schema lists ``required`` first when a field must be present.

Record rules see the whole draft and return a field -> message mapping, for
constraints spanning two fields such as date ordering.
"""

import re
from typing import Callable, Mapping, Optional

from dairyops.utils.date_parser import parse_date
from dairyops.utils.number_parser import MAX_DIGITS, parse_number

Rule = Callable[[str], Optional[str]]
RecordRule = Callable[[Mapping[str, str]], dict[str, str]]

CAPITALIZED_ALPHA = r"[A-Z][a-zA-Z ]*"
EMAIL = r"[^\s@]+@[^\s@]+\.[^\s@]+"


def _blank(value: str) -> bool:
    return not value or not value.strip()


def required(message: str) -> Rule:
    """Value must be non-empty after trimming."""

    def check(value: str) -> Optional[str]:
        return message if _blank(value) else None

    return check


def matches(pattern: str, message: str) -> Rule:
    """Value must match the whole regular expression."""
    compiled = re.compile(pattern)

    def check(value: str) -> Optional[str]:
        if _blank(value):
            return None
        return None if compiled.fullmatch(value) else message

    return check


def capitalized_alpha(message: str) -> Rule:
    """Capital first letter followed by letters and spaces only."""
    return matches(CAPITALIZED_ALPHA, message)


def fixed_digits(length: int, message: str) -> Rule:
    """Exactly ``length`` digits, e.g. a 10-digit phone number."""
    return matches(rf"\d{{{length}}}", message)


def digits(message: str) -> Rule:
    """Digits only, at most MAX_DIGITS of them after any leading zeros."""
    return matches(rf"0*\d{{1,{MAX_DIGITS}}}", message)


def positive_integer(message: str) -> Rule:
    """Whole number strictly greater than zero, without leading zeros.

    At most MAX_DIGITS digits long.
    """
    return matches(rf"[1-9]\d{{0,{MAX_DIGITS - 1}}}", message)


def prefixed_id(prefix: str, message: str) -> Rule:
    """Identifier made of ``prefix`` followed by at least four digits."""
    return matches(rf"{re.escape(prefix)}\d{{4,}}", message)


def email(message: str) -> Rule:
    return matches(EMAIL, message)


def starts_with_capital(message: str) -> Rule:
    return matches(r"[A-Z].*", message)


def positive_number(message: str) -> Rule:
    """Numeric value strictly greater than zero.

    Malformed numbers fail the rule rather than raising.
    """

    def check(value: str) -> Optional[str]:
        if _blank(value):
            return None
        try:
            number = parse_number(value)
        except ValueError:
            return message
        return None if number > 0 else message

    return check


def numeric(message: str) -> Rule:
    """Any number, including zero and negative values."""

    def check(value: str) -> Optional[str]:
        if _blank(value):
            return None
        try:
            parse_number(value)
        except ValueError:
            return message
        return None

    return check


def one_of(choices: tuple[str, ...], message: str) -> Rule:
    """Value must equal one of the allowed choices."""

    def check(value: str) -> Optional[str]:
        if _blank(value):
            return None
        return None if value in choices else message

    return check


def max_length(length: int, message: str) -> Rule:
    def check(value: str) -> Optional[str]:
        return message if len(value) > length else None

    return check


def valid_date(message: str) -> Rule:
    def check(value: str) -> Optional[str]:
        if _blank(value):
            return None
        try:
            parse_date(value)
        except ValueError:
            return message
        return None

    return check


def date_not_before(field: str, other: str, message: str) -> RecordRule:
    """When both dates are present and parse, ``field`` must not precede ``other``."""

    def check(draft: Mapping[str, str]) -> dict[str, str]:
        value = draft.get(field, "")
        other_value = draft.get(other, "")
        if _blank(value) or _blank(other_value):
            return {}
        try:
            if parse_date(value) < parse_date(other_value):
                return {field: message}
        except ValueError:
            # Unparseable dates are reported by their own field rules
            return {}
        return {}

    return check
