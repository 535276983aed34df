"""Mapper functions to convert SQLAlchemy models to domain entities."""

from fintrack.domain import entities as domain
from fintrack.database.models import Transaction as ORMTransaction


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        amount=orm_transaction.amount,
        date=orm_transaction.date,
        description=orm_transaction.description,
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )
