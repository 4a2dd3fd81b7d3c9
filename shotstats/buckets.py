"""
Shot histogram bucketing for shotstats.

Each shot is assigned to an integer ring 0-10:
  - Tenth-ring scoring: floor(value). A 9.5 is a nine with bonus tenths,
    not a rounded ten.
  - Whole-ring scoring: round half up, guarding against stray float noise.

Bucket indices are clamped to [0, 10]. Unparseable shots are skipped and
never land in bucket 0.
"""

import logging
from decimal import Decimal
from typing import Iterable, Optional

import numpy as np

from shotstats.models.discipline import is_decimal_scoring
from shotstats.models.session import SessionRecord, ShotDistributionRow
from shotstats.scoring import parse_shot
from shotstats.utils.constants import (
    BUCKET_COUNT,
    MAX_RING,
    MIN_RING,
    REPORT_DECIMALS,
)
from shotstats.utils.rounding import round_half_up

logger = logging.getLogger(__name__)


def bucketize(shots: Iterable[str], is_decimal: bool) -> list[int]:
    """Count shots per ring.

    Args:
        shots: Shot values as entered (decimal strings).
        is_decimal: True for tenth-ring scoring (floor), False for whole
                    rings (round half up).

    Returns:
        List of 11 counts; index i holds the number of shots in ring i.
    """
    values = [v for v in (parse_shot(s) for s in shots) if v is not None]
    if not values:
        return [0] * BUCKET_COUNT

    arr = np.asarray(values, dtype=float)
    if is_decimal:
        rings = np.floor(arr)
    else:
        # np.round rounds half to even; rings round half up
        rings = np.floor(arr + 0.5)
    rings = np.clip(rings, MIN_RING, MAX_RING).astype(int)

    counts = np.bincount(rings, minlength=BUCKET_COUNT)
    return [int(c) for c in counts]


def to_percent(count: int, total: int, decimals: int = REPORT_DECIMALS) -> float:
    """Share of ``count`` in ``total`` as a percentage, rounded half up.

    A zero total gives 0.0; callers skip such rows before converting.
    """
    if total == 0:
        return 0.0
    return round_half_up(Decimal(count) * 100 / Decimal(total), decimals)


def session_shots(session: SessionRecord) -> list[str]:
    """All recorded shots of a session's non-practice series, in order."""
    shots = []
    for serie in session.series:
        if serie.is_practice or not serie.shots:
            continue
        shots.extend(serie.shots)
    return shots


def distribution_row(session: SessionRecord,
                     decimals: int = REPORT_DECIMALS) -> Optional[ShotDistributionRow]:
    """Percentage of a session's shots per ring.

    Returns None when the session has no readable individual shots, so such
    sessions stay invisible in the distribution view instead of showing up
    as rows of zeros.
    """
    shots = [s for s in session_shots(session) if parse_shot(s) is not None]
    total = len(shots)
    if total == 0:
        return None

    counts = bucketize(shots, is_decimal_scoring(session.discipline))
    return ShotDistributionRow(
        session_id=session.id,
        date=session.date,
        discipline_id=session.discipline_id,
        total_shots=total,
        percentages=tuple(to_percent(c, total, decimals) for c in counts),
    )


def shot_distribution(sessions: Iterable[SessionRecord],
                      decimals: int = REPORT_DECIMALS) -> list[ShotDistributionRow]:
    """Distribution rows for every session with recorded shots, input order kept."""
    rows = []
    skipped = 0
    for session in sessions:
        row = distribution_row(session, decimals)
        if row is None:
            skipped += 1
            continue
        rows.append(row)

    logger.debug(
        f"shot_distribution: {len(rows)} rows, {skipped} sessions without shots"
    )
    return rows
