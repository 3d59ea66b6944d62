"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow", "next week", etc.

    Args:
        date_str: Date string in various formats
        today: Reference day for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if not date_str:
        raise ValueError("Empty date string")
    if today is None:
        today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Handle "last/next" + period, anchored on today
    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "week":
            return today - timedelta(days=7)
        elif period == "month":
            return today - relativedelta(months=1)
        elif period == "year":
            return today - relativedelta(years=1)

    elif date_str.startswith("next "):
        period = date_str[5:]
        if period == "week":
            return today + timedelta(days=7)
        elif period == "month":
            return today + relativedelta(months=1)
        elif period == "year":
            return today + relativedelta(years=1)

    # Try parsing as absolute date
    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def days_until(target: date, today: Optional[date] = None) -> int:
    """Return the number of whole days from today until target (negative if past)."""
    if today is None:
        today = date.today()
    return (target - today).days
