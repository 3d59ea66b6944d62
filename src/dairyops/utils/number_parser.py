"""Number parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

# Largest number of significant digits a form number may carry
MAX_DIGITS = 12
# Numbers must lie between 10**-MAX_EXPONENT and 10**(MAX_EXPONENT + 1)
MAX_EXPONENT = 12


def _significant_digits(number: Decimal) -> int:
    return len("".join(map(str, number.as_tuple().digits)).strip("0"))


def parse_number(number_str: str) -> Decimal:
    """Parse a numeric string into a Decimal.

    Handles the forms a numeric form field accepts:
    - "10"
    - "12.5"
    - "-3"
    - "1e3"
    - " 42 " (surrounding whitespace)

    Numbers with more than MAX_DIGITS significant digits, or a magnitude
    outside the MAX_EXPONENT range, are rejected so that sums and ratios
    over them stay exact.

    Args:
        number_str: Number string

    Returns:
        Decimal value

    Raises:
        ValueError: If the string is empty, malformed, NaN, infinite or out
            of range
    """
    if not number_str or not number_str.strip():
        raise ValueError("Empty number string")

    number_str = number_str.strip()

    # Decimal() accepts "NaN"/"Infinity" and digit separators such as "1_000"
    if not re.fullmatch(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", number_str):
        raise ValueError(f"Could not parse number '{number_str}'")

    try:
        number = Decimal(number_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse number '{number_str}': {e}")

    if number and (
        _significant_digits(number) > MAX_DIGITS
        or not -MAX_EXPONENT <= number.adjusted() <= MAX_EXPONENT
    ):
        raise ValueError(f"Number '{number_str}' is out of range")
    return number


def parse_integer(number_str: str) -> int:
    """Parse a whole-number string into an int.

    Raises:
        ValueError: If the string is not a plain integer of at most
            MAX_DIGITS digits
    """
    if not number_str or not number_str.strip():
        raise ValueError("Empty number string")

    number_str = number_str.strip()
    if not re.fullmatch(r"[+-]?\d+", number_str):
        raise ValueError(f"Could not parse integer '{number_str}'")
    if len(number_str.lstrip("+-").lstrip("0")) > MAX_DIGITS:
        raise ValueError(f"Integer '{number_str}' is out of range")
    return int(number_str)
