"""Decimal helpers for money math.

Simulations keep balances as ``Decimal`` values quantized to cents so that
hundreds of monthly iterations never accumulate float drift. Results are
converted to ``float`` only when they leave the engine.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_cents(amount: float | int | str | Decimal) -> Decimal:
    """Return *amount* as a Decimal rounded half-up to whole cents."""

    if isinstance(amount, float):
        # shortest repr: 0.1 stays 0.1
        amount = str(amount)
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def to_float(amount: Decimal) -> float:
    """Convert a cent-quantized Decimal into a display float."""

    return float(amount.quantize(CENT, rounding=ROUND_HALF_UP))


def monthly_rate(annual_percentage: float | Decimal) -> Decimal:
    """Return the monthly periodic rate for an annual percentage rate."""

    if isinstance(annual_percentage, float):
        annual_percentage = str(annual_percentage)
    return Decimal(annual_percentage) / Decimal(1200)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a cashier does (0.5 goes up), unlike ``round``'s banker's rounding."""

    exponent = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))
