"""
Session summaries and the derived point sets of the statistics view.

Composes the pure engine functions over loaded session records:
  - summarize_session(): total score, shot count and per-shot rate
  - filter_sessions(): type / discipline / date range selection
  - wellbeing_points(), wellbeing_correlation(): wellbeing vs. performance
  - quality_points(): execution quality vs. per-series rate

The stored series score is authoritative everywhere; individual shots only
determine shot counts (and the histogram, see buckets.py).
"""

import logging
from datetime import datetime, time
from decimal import Decimal
from typing import Iterable, List, Optional

import numpy as np
from scipy import stats

from shotstats.models.series import QualityPoint
from shotstats.models.session import (
    SessionRecord,
    SessionSummary,
    StatsFilters,
    WellbeingPoint,
)
from shotstats.normalize import per_shot_rate
from shotstats.scoring import parse_score
from shotstats.utils.constants import (
    FILTER_ALL,
    SCORING_SESSION_TYPES,
    WELLBEING_METRICS,
)

logger = logging.getLogger(__name__)


def _scored_series(session: SessionRecord):
    """Yield (series, score) for non-practice series with a readable score."""
    for serie in session.series:
        if serie.is_practice:
            continue
        score = parse_score(serie.score_total)
        if score is None:
            continue
        yield serie, score


def summarize_session(session: SessionRecord) -> SessionSummary:
    """Compute the scored totals of one session.

    Shots are counted over scored series only, so a series that was
    created but never scored does not dilute the per-shot rate.
    """
    total = Decimal(0)
    shots = 0
    scored = 0
    for serie, score in _scored_series(session):
        total += score
        shots += serie.shot_count
        scored += 1

    return SessionSummary(
        session_id=session.id,
        date=session.date,
        type=session.type,
        discipline=session.discipline,
        total_score=float(total) if scored else None,
        avg_per_shot=per_shot_rate(total, shots),
        total_non_practice_shots=shots,
    )


def summarize_sessions(sessions: Iterable[SessionRecord]) -> List[SessionSummary]:
    """Summaries of all sessions, chronologically ascending."""
    summaries = [summarize_session(s) for s in sessions]
    summaries.sort(key=lambda s: s.date)
    logger.debug(f"summarize_sessions: {len(summaries)} sessions")
    return summaries


def _is_set(value) -> bool:
    return value is not None and value != FILTER_ALL


def filter_sessions(sessions: Iterable, filters: StatsFilters) -> list:
    """Select sessions (records or summaries) matching the filters.

    ``date_to`` includes the whole of that day.
    """
    date_from = (
        datetime.combine(filters.date_from, time.min) if filters.date_from else None
    )
    date_to = (
        datetime.combine(filters.date_to, time.max) if filters.date_to else None
    )

    selected = []
    for s in sessions:
        if _is_set(filters.type) and s.type != filters.type:
            continue
        if _is_set(filters.discipline_id) and s.discipline_id != filters.discipline_id:
            continue
        if date_from is not None and s.date < date_from:
            continue
        if date_to is not None and s.date > date_to:
            continue
        selected.append(s)
    return selected


def wellbeing_points(sessions: Iterable[SessionRecord]) -> List[WellbeingPoint]:
    """Per-shot rate of each scoring session that has a wellbeing entry.

    Sessions without a positive rate (nothing scored, dry training) are
    left out.
    """
    points = []
    for session in sessions:
        if session.wellbeing is None or session.type not in SCORING_SESSION_TYPES:
            continue
        rate = summarize_session(session).avg_per_shot
        if rate is None or rate <= 0:
            continue
        wb = session.wellbeing
        points.append(
            WellbeingPoint(
                avg_per_shot=rate,
                discipline_id=session.discipline_id,
                sleep=wb.sleep,
                energy=wb.energy,
                stress=wb.stress,
                motivation=wb.motivation,
            )
        )
    return points


def wellbeing_correlation(points: List[WellbeingPoint], metric: str) -> Optional[float]:
    """Pearson correlation between a wellbeing metric and the per-shot rate.

    Args:
        points: Output of wellbeing_points().
        metric: One of "sleep", "energy", "stress", "motivation".

    Returns:
        Correlation coefficient in [-1, 1], or None with fewer than two
        points or when either side is constant.

    Raises:
        ValueError: If ``metric`` is not a wellbeing metric.
    """
    if metric not in WELLBEING_METRICS:
        raise ValueError(f"Unknown wellbeing metric: {metric}")
    if len(points) < 2:
        return None

    x = np.asarray([getattr(p, metric) for p in points], dtype=float)
    y = np.asarray([p.avg_per_shot for p in points], dtype=float)
    if np.ptp(x) == 0 or np.ptp(y) == 0:
        return None

    r = stats.pearsonr(x, y)[0]
    logger.debug(
        f"wellbeing_correlation({metric}): r={r:.3f} over {len(points)} points"
    )
    return float(r)


def quality_points(sessions: Iterable[SessionRecord]) -> List[QualityPoint]:
    """Execution quality against the per-shot rate of each rated series."""
    points = []
    for session in sessions:
        if session.type not in SCORING_SESSION_TYPES:
            continue
        for serie, score in _scored_series(session):
            rate = per_shot_rate(score, serie.shot_count)
            if serie.execution_quality is None or rate is None:
                continue
            points.append(
                QualityPoint(
                    quality=serie.execution_quality,
                    score_per_shot=rate,
                    discipline_id=session.discipline_id,
                )
            )
    return points
