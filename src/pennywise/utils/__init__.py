"""Utility functions for pennywise."""

from pennywise.utils.date_parser import parse_date, add_months, month_range
from pennywise.utils.amount_parser import parse_amount

__all__ = ["parse_date", "add_months", "month_range", "parse_amount"]
