"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
database schema. Aggregation results are plain values as well, so the
presentation layer can format or serialize them without touching the
database.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    amount: Decimal
    date: datetime
    description: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class BalanceSummary:
    """Income, expense and balance totals over a set of transactions.

    ``excluded`` counts records skipped because their amount was not a
    finite number.
    """

    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")
    excluded: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "income": float(self.income),
            "expenses": float(self.expenses),
            "balance": float(self.balance),
            "excluded": self.excluded,
        }


@dataclass(frozen=True)
class MonthlyBucket:
    """Income and expense totals for one calendar month (index 0-11)."""

    month_index: int
    label: str
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")

    def to_dict(self) -> dict[str, Any]:
        return {
            "month_index": self.month_index,
            "label": self.label,
            "income": float(self.income),
            "expenses": float(self.expenses),
        }


@dataclass(frozen=True)
class MonthlyReport:
    """Monthly series for a selected year plus the years available."""

    year: int
    years: tuple[int, ...]
    months: tuple[MonthlyBucket, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "years": list(self.years),
            "months": [month.to_dict() for month in self.months],
        }


@dataclass(frozen=True)
class FieldError:
    """A single field validation failure."""

    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating transaction fields before a write."""

    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors

    def messages(self) -> list[str]:
        return [f"{error.field}: {error.message}" for error in self.errors]
