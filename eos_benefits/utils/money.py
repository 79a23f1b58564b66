# eos_benefits/utils/money.py

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from eos_benefits.config import REPORT_DECIMAL_PLACES

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """
    Normalises an upstream monetary value to Decimal.
    None, empty strings, NaN, infinities and anything non-numeric become 0.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip() or "0")
        except (InvalidOperation, ValueError, TypeError):
            return ZERO
    if not amount.is_finite():
        return ZERO
    return amount


def round_money(amount: Decimal, places: int = REPORT_DECIMAL_PLACES) -> Decimal:
    """Rounds half up to `places` decimals, the way amounts are shown on reports."""
    quantum = Decimal(1).scaleb(-places)
    return to_decimal(amount).quantize(quantum, rounding=ROUND_HALF_UP)
