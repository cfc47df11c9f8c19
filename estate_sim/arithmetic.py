"""Numeric helpers shared by the record calculators.

Record metrics never raise on degenerate inputs. Divisions that are not
explicitly guarded follow IEEE-754 semantics: ``x / 0`` is a signed infinity
and ``0 / 0`` is NaN.
"""

import math
from decimal import Decimal


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide like a hardware float unit instead of raising ZeroDivisionError."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return float(numerator) / float(denominator)


def truncate(value: float | Decimal | int) -> int | float:
    """Truncate toward zero.

    Non-finite floats are returned unchanged since they have no integer
    representation.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return math.trunc(value)


def trunc_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero (``-7 // 2`` is -4, this is -3)."""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend >= 0) == (divisor > 0) else -quotient
