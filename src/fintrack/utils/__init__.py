"""Utility functions for fintrack."""

from fintrack.utils.date_parser import parse_date, month_bounds
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.formatting import format_currency, ordinal_suffix

__all__ = [
    "parse_date",
    "month_bounds",
    "parse_amount",
    "format_currency",
    "ordinal_suffix",
]
