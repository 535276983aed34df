"""Amount coercion and the income/expense sign convention.

Every place that needs to decide whether a transaction is income or an
expense goes through these helpers: positive and zero amounts are income,
negative amounts are expenses whose magnitude is the expense value.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from fintrack.utils.amount_parser import parse_amount

ZERO = Decimal("0")


def to_amount(value: Any) -> Optional[Decimal]:
    """Coerce a stored amount to a finite Decimal.

    Returns None when the value is not a finite number: non-numeric strings,
    NaN, infinities, None and booleans. Nothing is ever coerced to zero.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        # str() keeps 0.1 as 0.1 instead of its binary expansion
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            return None
    elif isinstance(value, str):
        try:
            amount = parse_amount(value)
        except ValueError:
            return None
    else:
        return None

    if not amount.is_finite():
        return None
    return amount


def is_income(amount: Decimal) -> bool:
    """Return True when the amount counts as income."""
    return amount >= 0


def split_amount(amount: Decimal) -> tuple[Decimal, Decimal]:
    """Split a signed amount into (income, expense) magnitudes."""
    if is_income(amount):
        return amount, ZERO
    return ZERO, -amount
