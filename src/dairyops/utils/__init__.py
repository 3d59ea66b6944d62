"""Utility functions for dairyops."""

from dairyops.utils.date_parser import parse_date
from dairyops.utils.number_parser import parse_number, parse_integer

__all__ = ["parse_date", "parse_number", "parse_integer"]
