"""Explicit field validation run before every transaction write."""

from datetime import date
from typing import Any

from fintrack.domain.amounts import to_amount
from fintrack.domain.entities import FieldError, ValidationResult


def validate_transaction(
    amount: Any,
    date_value: Any,
    description: Any,
    partial: bool = False,
) -> ValidationResult:
    """Validate transaction fields.

    Args:
        amount: Amount to store
        date_value: Transaction date (date or datetime)
        description: Description text
        partial: If True, None means "leave unchanged" and is accepted

    Returns:
        ValidationResult listing every failing field
    """
    errors: list[FieldError] = []

    if amount is None:
        if not partial:
            errors.append(FieldError("amount", "Please provide an amount"))
    elif to_amount(amount) is None:
        errors.append(FieldError("amount", "Amount must be a finite number"))

    if date_value is None:
        if not partial:
            errors.append(FieldError("date", "Please provide a date"))
    elif not isinstance(date_value, date):
        errors.append(FieldError("date", "Invalid date"))

    if description is None:
        if not partial:
            errors.append(FieldError("description", "Please provide a description"))
    elif not isinstance(description, str) or not description.strip():
        errors.append(FieldError("description", "Please provide a description"))

    return ValidationResult(errors=tuple(errors))
