"""Per-month income/expense series for charting."""

from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Optional, Sequence

from fintrack.domain.amounts import ZERO, split_amount
from fintrack.domain.entities import MonthlyBucket
from fintrack.domain.snapshot import record_amount, record_date, snapshot
from fintrack.logging_setup import get_logger

logger = get_logger(__name__)

MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def available_years(transactions: Iterable[Any]) -> list[int]:
    """Return the distinct calendar years present, most recent first.

    Records without a readable date are left out.
    """
    years = set()
    for record in snapshot(transactions):
        when = record_date(record)
        if when is None:
            logger.debug("Skipping record with unreadable date: %r", record)
            continue
        years.add(when.year)
    return sorted(years, reverse=True)


def monthly_series(transactions: Iterable[Any], year: int) -> list[MonthlyBucket]:
    """Bucket one year's transactions by calendar month.

    Always returns twelve buckets, January (index 0) to December (index 11).
    Records from other years, with unreadable dates, or with amounts that
    are not finite numbers do not contribute.
    """
    income = [ZERO] * 12
    expenses = [ZERO] * 12

    for record in snapshot(transactions):
        when = record_date(record)
        if when is None or when.year != year:
            continue
        amount = record_amount(record)
        if amount is None:
            logger.debug("Skipping record with invalid amount: %r", record)
            continue
        month = when.month - 1
        inflow, outflow = split_amount(amount)
        income[month] += inflow
        expenses[month] += outflow

    return [
        MonthlyBucket(
            month_index=index,
            label=label,
            income=income[index],
            expenses=expenses[index],
        )
        for index, label in enumerate(MONTH_LABELS)
    ]


def select_default_year(years: Sequence[int], today: Optional[date] = None) -> int:
    """Pick the year a chart should open on.

    The current year when the data has it (or there is no data at all),
    otherwise the most recent year available.
    """
    current_year = (today or date.today()).year
    if not years or current_year in years:
        return current_year
    return max(years)


def series_totals(buckets: Sequence[MonthlyBucket]) -> tuple[Decimal, Decimal]:
    """Sum a monthly series into (income, expenses)."""
    return (
        sum((bucket.income for bucket in buckets), ZERO),
        sum((bucket.expenses for bucket in buckets), ZERO),
    )
