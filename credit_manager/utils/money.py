"""Conversion between API decimal amounts and stored integer cents"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

CENT = Decimal("0.01")

Amount = Union[Decimal, float, int, str]


def to_cents(amount: Amount) -> int:
    """
    Convert a decimal amount to integer cents.

    Floats go through `str` so 0.1 becomes exactly 10 cents rather than
    inheriting binary representation error.
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def optional_cents(amount: Optional[Amount]) -> Optional[int]:
    return None if amount is None else to_cents(amount)


def from_cents(cents: int) -> float:
    """Render cents as the plain decimal number used in JSON responses"""
    return float((Decimal(cents) * CENT).quantize(CENT))


def round_half_up_div(numerator: int, denominator: int) -> int:
    """Integer division rounded half away from zero for non-negative operands"""
    return (2 * numerator + denominator) // (2 * denominator)
