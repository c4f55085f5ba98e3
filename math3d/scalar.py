"""Scalar helpers shared by the vector and point types."""

from __future__ import annotations

import math

__all__ = ["divide"]


def divide(a: float, b: float) -> float:
    """Return ``a / b`` with IEEE-754 semantics.

    Python raises :class:`ZeroDivisionError` for float division by zero; here a
    zero divisor yields ``±inf`` (sign from both operands) or ``nan`` for
    ``0/0`` and ``nan/0``.
    """
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)
