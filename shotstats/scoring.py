"""
Score aggregation for shotstats.

Turns series results into session totals and averages:
  - Practice series never count
  - Unscored series count as 0 toward a total
  - Sums are accumulated as Decimal and rounded only when reported

Nothing here raises on malformed numbers; unparseable values are treated
as absent because they come straight from free-form user entry.
"""

import logging
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from shotstats.utils.rounding import round_half_up, to_decimal

logger = logging.getLogger(__name__)


def parse_score(value) -> Optional[Decimal]:
    """Parse a series score (number or decimal string) into a Decimal.

    Returns None for missing, empty, unparseable or non-finite values.
    """
    return to_decimal(value)


def parse_shot(value) -> Optional[float]:
    """Parse a single shot value, None when it cannot be read as a number."""
    dec = to_decimal(value)
    if dec is None:
        return None
    return float(dec)


def total_score(series: Iterable) -> float:
    """Sum the scores of all non-practice series.

    Args:
        series: Series results exposing ``score_total`` and ``is_practice``.

    Returns:
        Session total. Unscored or unreadable series contribute 0; an empty
        or practice-only list gives 0.
    """
    total = Decimal(0)
    counted = 0
    for s in series:
        if s.is_practice:
            continue
        score = parse_score(s.score_total)
        if score is None:
            continue
        total += score
        counted += 1

    logger.debug(f"total_score: {counted} scored series, total={total}")
    return float(total)


def average(values: Sequence) -> Optional[float]:
    """Arithmetic mean of the readable values, None if there are none.

    None, NaN and unparseable entries are left out; numbers, Decimals and
    decimal strings may be mixed.
    """
    valid = [v for v in (to_decimal(x) for x in values) if v is not None]
    if not valid:
        return None
    return float(sum(valid, Decimal(0)) / len(valid))


def sum_from_shots(shots: Iterable[str]) -> float:
    """Sum individual shot values into a series score.

    Empty or unparseable entries contribute 0. The sum is rounded to one
    decimal once, after adding, never per shot.
    """
    total = Decimal(0)
    for shot in shots:
        value = to_decimal(shot)
        if value is not None:
            total += value
    return round_half_up(total, 1)


def resolve_series_shot_count(shots: Optional[Sequence], fallback: int) -> int:
    """Number of shots in a series.

    When individual shots were recorded, their count is exact. Otherwise
    the discipline's shots-per-series is the best available estimate.
    """
    if shots:
        return len(shots)
    return fallback
