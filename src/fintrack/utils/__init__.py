"""Utility functions for fintrack."""

from fintrack.utils.date_parser import coerce_date, parse_date
from fintrack.utils.amount_parser import parse_amount

__all__ = ["coerce_date", "parse_date", "parse_amount"]
