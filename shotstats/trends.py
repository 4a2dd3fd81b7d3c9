"""
Trend smoothing for score sequences.

A symmetric moving average that is truncated at the array edges and that
stays silent (None) wherever its window holds too few real data points.
"""

import math
from decimal import Decimal
from typing import List, Optional, Sequence

from shotstats.utils.constants import REPORT_DECIMALS
from shotstats.utils.rounding import round_half_up, to_decimal


def moving_average(
    values: Sequence[Optional[float]],
    window_size: int,
    decimals: int = REPORT_DECIMALS,
) -> List[Optional[float]]:
    """Symmetric moving average with a confidence floor.

    For index i the window spans [max(0, i - half), min(n - 1, i + half)]
    with half = window_size // 2. None entries inside the window are left
    out of the average but do not shrink the window. A position reports a
    value only when the window holds at least ceil(window_size / 2) real
    values, so a 5-wide window needs 3 data points.

    Args:
        values: Score sequence, chronologically ordered; None marks gaps.
        window_size: Window width (odd widths give symmetric windows).
        decimals: Decimal places of the reported averages.

    Returns:
        List of the same length as ``values``, or [] when ``values`` is
        empty or ``window_size`` <= 0.
    """
    n = len(values)
    if n == 0 or window_size <= 0:
        return []

    half = window_size // 2
    min_required = math.ceil(window_size / 2)
    parsed = [to_decimal(v) for v in values]

    result: List[Optional[float]] = []
    for i in range(n):
        start = max(0, i - half)
        end = min(n - 1, i + half)
        window = [v for v in parsed[start:end + 1] if v is not None]

        if len(window) < min_required:
            result.append(None)
            continue

        mean = sum(window, Decimal(0)) / len(window)
        result.append(round_half_up(mean, decimals))

    return result
