"""Balance summary aggregation and summary domain service."""

from datetime import date
from typing import Any, Iterable, Optional

from fintrack.database.base import Database
from fintrack.domain.amounts import ZERO, split_amount
from fintrack.domain.entities import BalanceSummary, MonthlyReport
from fintrack.domain.snapshot import record_amount, snapshot
from fintrack.domain.timeseries import (
    available_years,
    monthly_series,
    select_default_year,
)
from fintrack.logging_setup import get_logger

logger = get_logger(__name__)


def summarize(transactions: Iterable[Any]) -> BalanceSummary:
    """Reduce transactions to income, expense and balance totals.

    Records whose amount is not a finite number are skipped and counted in
    ``excluded``; they never raise and never touch the totals.

    Raises:
        InvalidInputError: If the argument is not a collection of
            transaction-like records
    """
    income = ZERO
    expenses = ZERO
    balance = ZERO
    excluded = 0

    for record in snapshot(transactions):
        amount = record_amount(record)
        if amount is None:
            excluded += 1
            logger.debug("Skipping record with invalid amount: %r", record)
            continue
        inflow, outflow = split_amount(amount)
        income += inflow
        expenses += outflow
        balance += amount

    return BalanceSummary(
        income=income, expenses=expenses, balance=balance, excluded=excluded
    )


class SummaryService:
    """Service feeding stored transactions to the aggregators."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_balance_summary(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> BalanceSummary:
        """Summarize stored transactions, optionally within a date range."""
        transactions = self.db.list_transactions(
            start_date=start_date, end_date=end_date
        )
        summary = summarize(transactions)
        if summary.excluded:
            logger.warning(
                "Excluded %d transaction(s) with invalid amounts from summary",
                summary.excluded,
            )
        return summary

    def get_available_years(self) -> list[int]:
        """Years with stored transactions, most recent first."""
        return available_years(self.db.list_transactions())

    def get_monthly_report(
        self, year: Optional[int] = None, today: Optional[date] = None
    ) -> MonthlyReport:
        """Build the monthly series for a year.

        Args:
            year: Year to report on; chosen with ``select_default_year`` when
                None
            today: Reference date for the default year (defaults to today)

        Returns:
            MonthlyReport with the selected year, available years and twelve
            monthly buckets
        """
        # One snapshot for both years and buckets
        transactions = self.db.list_transactions()
        years = available_years(transactions)
        if year is None:
            year = select_default_year(years, today=today)
        return MonthlyReport(
            year=year,
            years=tuple(years),
            months=tuple(monthly_series(transactions, year)),
        )
