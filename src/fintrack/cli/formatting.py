"""Display formatting for amounts and transaction rows."""

from decimal import Decimal

from fintrack.domain.amounts import is_income


def format_currency(amount: Decimal, places: int = 2) -> str:
    """Format an amount as dollars, e.g. $1,234.56 or -$12.00.

    Amounts that round to zero never carry a minus sign.
    """
    digits = f"{abs(amount):,.{places}f}"
    rounds_to_zero = not digits.strip("0.,")
    sign = "" if is_income(amount) or rounds_to_zero else "-"
    return f"{sign}${digits}"


def flow_label(amount: Decimal) -> str:
    """Return "Income" or "Expense" for a signed amount."""
    return "Income" if is_income(amount) else "Expense"
