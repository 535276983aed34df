"""Shared domain error messages and error types."""

from typing import Optional

from fintrack.domain.entities import ValidationResult


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""

    def __init__(self, message: str, result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.result = result if result is not None else ValidationResult()


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class InvalidInputError(DomainError, TypeError):
    """Aggregation input is not a collection of transaction-like records."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def invalid_transactions_argument(value: object) -> str:
    """Return message for a non-iterable aggregation argument."""
    return (
        "Expected an iterable of transactions, got "
        f"{type(value).__name__}"
    )


def invalid_transaction_record(index: int, record: object) -> str:
    """Return message for an element that is not transaction-like."""
    return (
        f"Record {index} is not a transaction (got {type(record).__name__}); "
        "expected a mapping or an object with 'amount' and 'date'"
    )


def validation_failed(result: ValidationResult) -> str:
    """Return message summarizing failed field validation."""
    return "Invalid transaction: " + "; ".join(result.messages())
