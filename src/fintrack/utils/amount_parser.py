"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

_CURRENCY_SYMBOLS = re.compile(r"[$€£¥]")
_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "-$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Unlike permissive float parsing, the whole string must be a number:
    "12abc", "NaN" and "Infinity" are rejected rather than read as a prefix
    or a non-finite value.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str.strip()

    is_negative = False
    if cleaned.startswith("(") and cleaned.endswith(")"):
        is_negative = True
        cleaned = cleaned[1:-1]

    cleaned = _CURRENCY_SYMBOLS.sub("", cleaned)
    cleaned = cleaned.replace(",", "").replace(" ", "")

    # "-$5" becomes "-5" above; "$-5" is accepted the same way
    if not _NUMBER.match(cleaned) or (is_negative and cleaned[0] in "+-"):
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}': {e}")

    return -amount if is_negative else amount
