"""
Number rendering for chip labels, actions and trace reasons.

Labels are read by shoppers and actions are parsed by the frontend, so prices
must render the same way for the same value: whole numbers drop the decimal
part (450.0 -> "450") and fixed-point output rounds half away from zero.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Union

Number = Union[int, float]

# Wide enough to quantize any finite float without InvalidOperation.
_DECIMAL_CONTEXT = Context(prec=400)


def plain_number(value: Number) -> str:
    """Render a number without a trailing ".0" when it is whole."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def fixed(value: Number, digits: int) -> str:
    """Render `value` with exactly `digits` decimals."""
    if not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT))


def price_label(value: Number) -> str:
    """Whole prices render bare, everything else with two decimals."""
    if float(value).is_integer():
        return plain_number(value)
    return fixed(value, 2)


def percent(ratio: Number) -> str:
    """Whole-number percentage of a 0..1 ratio, without the % sign."""
    return fixed(ratio * 100, 0)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
