"""Reading transaction-like records for aggregation.

Aggregators accept domain ``Transaction`` entities, any object exposing
``amount`` and ``date`` attributes, or mappings with those keys (for example
decoded JSON). The input is materialized into a tuple once so every
aggregation works on a consistent snapshot.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from fintrack.domain.amounts import to_amount
from fintrack.domain.errors import (
    InvalidInputError,
    invalid_transaction_record,
    invalid_transactions_argument,
)
from fintrack.utils.date_parser import coerce_date

_RECORD_FIELDS = ("amount", "date")


def snapshot(transactions: Any) -> tuple[Any, ...]:
    """Materialize transactions into a tuple, checking the input shape.

    Raises:
        InvalidInputError: If the argument is not an iterable of
            transaction-like records
    """
    if (
        transactions is None
        or isinstance(transactions, (str, bytes, Mapping))
        or not isinstance(transactions, Iterable)
    ):
        raise InvalidInputError(invalid_transactions_argument(transactions))

    records = tuple(transactions)
    for index, record in enumerate(records):
        if not _is_transaction_like(record):
            raise InvalidInputError(invalid_transaction_record(index, record))
    return records


def _is_transaction_like(record: Any) -> bool:
    # At least one field must be present; a missing one reads as None
    if isinstance(record, Mapping):
        return any(name in record for name in _RECORD_FIELDS)
    # Methods such as datetime.date() are not fields
    return any(
        hasattr(record, name) and not callable(getattr(record, name))
        for name in _RECORD_FIELDS
    )


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def record_amount(record: Any) -> Optional[Decimal]:
    """Return the record's amount as a finite Decimal, or None."""
    return to_amount(_field(record, "amount"))


def record_date(record: Any) -> Optional[datetime]:
    """Return the record's date as stored, or None when missing/unparsable."""
    return coerce_date(_field(record, "date"))
