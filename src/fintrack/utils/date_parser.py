"""Date parsing utilities."""

from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_FILL_A = datetime(2000, 1, 1)
_FILL_B = datetime(2001, 2, 2)


def parse_date(date_str: str) -> date:
    """Parse a user-entered date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative forms "today", "yesterday", "tomorrow", "this month",
    "last month", "this year" and "last year" (the latter four resolve to
    the first day of the period).

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def coerce_date(value: Any) -> Optional[datetime]:
    """Read a stored transaction date without raising.

    Datetimes are returned as stored (no timezone conversion), plain dates
    become midnight datetimes and strings are parsed with dateutil. Anything
    else, including unparsable strings and strings that leave the year or
    month unspecified ("March", "15"), yields None.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            parsed = date_parser.parse(text, default=_FILL_A)
            check = date_parser.parse(text, default=_FILL_B)
        except (ValueError, OverflowError):
            return None
        # dateutil fills missing fields from the default
        if (parsed.year, parsed.month) != (check.year, check.month):
            return None
        return parsed
    return None


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: One of this-month, this-year, last-month, last-year

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()
    first_of_month = today.replace(day=1)
    first_of_year = today.replace(month=1, day=1)

    if period == "this-month":
        return first_of_month, today
    if period == "this-year":
        return first_of_year, today
    if period == "last-month":
        return first_of_month - relativedelta(months=1), first_of_month - timedelta(days=1)
    if period == "last-year":
        return first_of_year - relativedelta(years=1), first_of_year - timedelta(days=1)

    raise ValueError(
        f"Unknown period: '{period}'. Supported periods: "
        "this-month, this-year, last-month, last-year"
    )
