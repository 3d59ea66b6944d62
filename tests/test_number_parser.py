"""Tests for number parsing."""

import pytest
from decimal import Decimal
from dairyops.utils.number_parser import parse_integer, parse_number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10", Decimal("10")),
        ("12.5", Decimal("12.5")),
        (" 42 ", Decimal("42")),
        ("-3", Decimal("-3")),
        (".5", Decimal("0.5")),
        ("1e3", Decimal("1000")),
    ],
)
def test_parse_number(text, expected):
    """Test the numeric forms a form field accepts."""
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "NaN", "Infinity", "1_000", "1,000", "10L"])
def test_parse_number_rejects(text):
    """Test malformed, NaN and infinite input raise ValueError."""
    with pytest.raises(ValueError):
        parse_number(text)


def test_parse_integer():
    """Test plain whole numbers."""
    assert parse_integer("25") == 25
    assert parse_integer(" 007 ") == 7


@pytest.mark.parametrize("text", ["", "2.5", "five", "1e3"])
def test_parse_integer_rejects(text):
    """Test anything but a plain integer raises ValueError."""
    with pytest.raises(ValueError):
        parse_integer(text)


@pytest.mark.parametrize(
    "text",
    [
        "1e999999",
        "1" + "0" * 30,
        "1e27",
        "0.0000000000001",
        "1234567890123",
        "1.23456789012345",
    ],
)
def test_parse_number_rejects_out_of_range(text):
    """Test numbers too long or too large/small to sum exactly raise ValueError."""
    with pytest.raises(ValueError, match="out of range"):
        parse_number(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("999999999999", Decimal("999999999999")),
        ("0.000000000001", Decimal("1e-12")),
        ("5.000000000000000", Decimal("5")),
        ("0e-50", Decimal("0")),
    ],
)
def test_parse_number_range_limits(text, expected):
    """Test values at the edge of the range, and trailing zeros, still parse."""
    assert parse_number(text) == expected


def test_parse_integer_rejects_too_many_digits():
    assert parse_integer("999999999999") == 999999999999
    assert parse_integer("000999999999999") == 999999999999
    with pytest.raises(ValueError, match="out of range"):
        parse_integer("1" + "0" * 30)
