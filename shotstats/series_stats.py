"""
Per-position series statistics across sessions.

Series are grouped by their stored absolute position, not by their index
within a session, so sessions with differing series counts still line up.
"""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List

from shotstats.models.series import SeriesStats
from shotstats.scoring import parse_score
from shotstats.utils.constants import REPORT_DECIMALS
from shotstats.utils.rounding import round_half_up

logger = logging.getLogger(__name__)


def series_stats(sessions: Iterable,
                 decimals: int = REPORT_DECIMALS) -> List[SeriesStats]:
    """Compute min/max/avg per series position.

    Args:
        sessions: Sessions exposing a ``series`` list of series results.
        decimals: Decimal places for the reported average.

    Returns:
        One SeriesStats per position that has at least one scored
        non-practice series, sorted ascending by position.
    """
    by_position: Dict[int, List[Decimal]] = defaultdict(list)

    for session in sessions:
        for serie in session.series:
            if serie.is_practice:
                continue
            value = parse_score(serie.score_total)
            if value is None:
                continue
            by_position[serie.position].append(value)

    stats = []
    for position in sorted(by_position):
        values = by_position[position]
        stats.append(
            SeriesStats(
                position=position,
                min=float(min(values)),
                max=float(max(values)),
                avg=round_half_up(sum(values) / len(values), decimals),
                count=len(values),
            )
        )

    logger.debug(f"series_stats: {len(stats)} positions")
    return stats
