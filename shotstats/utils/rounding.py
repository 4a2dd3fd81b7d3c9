"""
Decimal-exact parsing and rounding helpers.

Scores like 94.7 cannot be represented exactly as binary floats, so sums
are accumulated as Decimal and rounded once, half-up, at the point where a
value is reported.
"""

import math
import numbers
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Optional


def to_decimal(value) -> Optional[Decimal]:
    """Convert a number or decimal string to a finite Decimal.

    Floats go through ``str`` so that 94.7 becomes Decimal("94.7") rather
    than its binary expansion. Returns None for None, booleans, empty or
    unparseable strings, NaN, infinities and magnitudes beyond the float
    range.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        dec = value
    elif isinstance(value, numbers.Real):
        dec = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            dec = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not dec.is_finite() or not math.isfinite(float(dec)):
        return None
    return dec


def _quantize(dec: Decimal, quantum: Decimal) -> Decimal:
    # quantize fails once the result has more digits than the context allows
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, dec.adjusted() - quantum.adjusted() + 2)
        return dec.quantize(quantum, rounding=ROUND_HALF_UP)


def round_half_up(value, digits: int = 1) -> float:
    """Round to ``digits`` decimal places with ties rounded away from zero.

    Python's built-in ``round`` rounds ties to even (``round(0.125, 2)``
    gives 0.12); reported scores must round 96.65 up to 96.7.
    """
    dec = value if isinstance(value, Decimal) else Decimal(str(value))
    return float(_quantize(dec, Decimal(1).scaleb(-digits)))


def round_to_int(value) -> int:
    """Round half up to the nearest integer."""
    dec = value if isinstance(value, Decimal) else Decimal(str(value))
    return int(_quantize(dec, Decimal(1)))
