"""Transaction domain service."""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional, Union

from fintrack.database.base import Database
from fintrack.domain.amounts import to_amount
from fintrack.domain.entities import Transaction as TransactionEntity
from fintrack.domain.errors import (
    NotFoundError,
    ValidationError,
    transaction_not_found,
    validation_failed,
)
from fintrack.domain.validation import validate_transaction
from fintrack.logging_setup import get_logger

logger = get_logger(__name__)

DateLike = Union[date, datetime]


def _as_datetime(value: Optional[DateLike]) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        amount: Union[Decimal, int, float, str],
        date: DateLike,
        description: str,
    ) -> int:
        """Create a transaction.

        Args:
            amount: Signed amount (negative for expenses)
            date: Transaction date
            description: Non-empty description

        Returns:
            Transaction ID

        Raises:
            ValidationError: If any field is missing or invalid
        """
        result = validate_transaction(amount, date, description)
        if not result.ok:
            raise ValidationError(validation_failed(result), result)

        transaction_id = self.db.create_transaction(
            amount=to_amount(amount),
            date=_as_datetime(date),
            description=description.strip(),
        )
        logger.info("Created transaction %s", transaction_id)
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID, or None if not found."""
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def update_transaction(
        self,
        transaction_id: int,
        amount: Optional[Union[Decimal, int, float, str]] = None,
        date: Optional[DateLike] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update transaction fields.

        Only the fields that are provided change; the ID never does.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If a provided field is invalid
        """
        self.require_transaction(transaction_id)

        result = validate_transaction(amount, date, description, partial=True)
        if not result.ok:
            raise ValidationError(validation_failed(result), result)

        self.db.update_transaction(
            transaction_id=transaction_id,
            amount=to_amount(amount) if amount is not None else None,
            date=_as_datetime(date),
            description=description.strip() if description is not None else None,
        )
        logger.info("Updated transaction %s", transaction_id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        self.require_transaction(transaction_id)
        self.db.delete_transaction(transaction_id)
        logger.info("Deleted transaction %s", transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TransactionEntity]:
        """List transactions, most recent first, with optional date filters."""
        return self.db.list_transactions(start_date=start_date, end_date=end_date)
