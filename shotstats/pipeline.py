"""
Statistics-view pipeline for shotstats.

  1. build_trend_line(): summaries → display values → moving-average trend
  2. load_sessions(): host query rows → SessionRecords (config-aware)
  3. build_report(): load → filter → summaries, trend, series stats, shot
     distribution, wellbeing and quality points in one pass

build_report() is the main entry point for the host's statistics view.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union

from shotstats.buckets import shot_distribution
from shotstats.models.discipline import Discipline
from shotstats.models.series import QualityPoint, SeriesStats
from shotstats.models.session import (
    SessionRecord,
    SessionSummary,
    ShotDistributionRow,
    StatsFilters,
    TrendPoint,
    WellbeingPoint,
)
from shotstats.normalize import DisplayMode, display_value, effective_display_mode
from shotstats.series_stats import series_stats
from shotstats.summary import (
    filter_sessions,
    quality_points,
    summarize_sessions,
    wellbeing_correlation,
    wellbeing_points,
)
from shotstats.trends import moving_average
from shotstats.utils.config import Config
from shotstats.utils.constants import (
    DEFAULT_TREND_WINDOW,
    FILTER_ALL,
    REPORT_DECIMALS,
    WELLBEING_METRICS,
)

logger = logging.getLogger(__name__)


def build_trend_line(
    summaries: Iterable[SessionSummary],
    mode: DisplayMode = DisplayMode.PER_SHOT,
    discipline: Optional[Discipline] = None,
    window_size: int = DEFAULT_TREND_WINDOW,
    decimals: int = REPORT_DECIMALS,
) -> List[TrendPoint]:
    """Build the results chart series with its trend line.

    Sessions without a per-shot rate are dropped first, then every value is
    expressed in the same (effective) display mode before smoothing, so the
    trend never mixes rates and projections.

    Args:
        summaries: Session summaries in chronological order.
        mode: Requested display mode.
        discipline: Selected discipline; projection falls back to per-shot
                    rates without one.
        window_size: Moving-average window in sessions.
        decimals: Decimal places of the trend values.

    Returns:
        One TrendPoint per session with a rate.
    """
    with_rate = [s for s in summaries if s.avg_per_shot is not None]
    effective = effective_display_mode(mode, discipline)

    values = [display_value(s.avg_per_shot, effective, discipline) for s in with_rate]
    trend = moving_average(values, window_size, decimals)
    if not trend:
        trend = [None] * len(values)

    logger.debug(
        f"Trend line built: {len(values)} sessions, mode={effective.value}, "
        f"window={window_size}"
    )

    return [
        TrendPoint(date=s.date, value=v, trend=t)
        for s, v, t in zip(with_rate, values, trend)
    ]


@dataclass
class StatsReport:
    """Everything the statistics view shows for one filter selection.

    Attributes:
        mode: Effective display mode of all score values in the report.
        discipline: Selected discipline, None when several are mixed.
        summaries: Filtered session summaries, chronological.
        trend: Results chart points with trend line.
        series_stats: Min/max/avg per series position.
        shot_distribution: Ring percentages per session with shots.
        wellbeing: Wellbeing points (raw per-shot rates).
        quality: Execution quality points (raw per-shot rates).
        correlations: Pearson r of each wellbeing metric against the rate.
        series_score_max: Highest reachable series score of the selected
                          discipline, the upper bound of the series chart.
    """
    mode: DisplayMode
    discipline: Optional[Discipline]
    summaries: List[SessionSummary] = field(default_factory=list)
    trend: List[TrendPoint] = field(default_factory=list)
    series_stats: List[SeriesStats] = field(default_factory=list)
    shot_distribution: List[ShotDistributionRow] = field(default_factory=list)
    wellbeing: List[WellbeingPoint] = field(default_factory=list)
    quality: List[QualityPoint] = field(default_factory=list)
    correlations: Dict[str, Optional[float]] = field(default_factory=dict)
    series_score_max: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value,
            "discipline_id": self.discipline.id if self.discipline else None,
            "summaries": [s.to_dict() for s in self.summaries],
            "trend": [p.to_dict() for p in self.trend],
            "series_stats": [s.to_dict() for s in self.series_stats],
            "shot_distribution": [r.to_dict() for r in self.shot_distribution],
            "wellbeing": [p.to_dict() for p in self.wellbeing],
            "quality": [p.to_dict() for p in self.quality],
            "correlations": dict(self.correlations),
            "series_score_max": self.series_score_max,
        }


def load_sessions(rows: Iterable[Union[SessionRecord, dict]],
                  config: Optional[Config] = None) -> List[SessionRecord]:
    """Build session records from the host's query rows.

    Series without recorded shots or a discipline fall back to the
    configured ``default_shots_per_series``. Rows that already are
    SessionRecords pass through unchanged.
    """
    config = config or Config()
    return [
        row if isinstance(row, SessionRecord)
        else SessionRecord.from_dict(row, config.default_shots_per_series)
        for row in rows
    ]


def _selected_discipline(sessions: List[SessionRecord],
                         discipline_id: Optional[str]) -> Optional[Discipline]:
    if discipline_id is None or discipline_id == FILTER_ALL:
        return None
    for session in sessions:
        if session.discipline_id == discipline_id:
            return session.discipline
    return None


def build_report(
    sessions: Iterable[Union[SessionRecord, dict]],
    filters: StatsFilters = StatsFilters(),
    mode: DisplayMode = DisplayMode.PER_SHOT,
    config: Optional[Config] = None,
) -> StatsReport:
    """Compute the full statistics view for a set of loaded sessions.

    The selected discipline is looked up among the sessions by the filter's
    discipline id; without one, projection falls back to per-shot rates.
    Wellbeing and quality points keep their raw rates, callers project them
    with the report's mode and discipline.

    Args:
        sessions: All sessions loaded by the host, as records or raw rows.
        filters: Type / discipline / date range selection.
        mode: Requested display mode.
        config: Engine settings; defaults when None.

    Returns:
        StatsReport for the filtered sessions.
    """
    config = config or Config()
    selected = filter_sessions(load_sessions(sessions, config), filters)
    discipline = _selected_discipline(selected, filters.discipline_id)
    effective = effective_display_mode(mode, discipline)
    summaries = summarize_sessions(selected)
    points = wellbeing_points(selected)

    report = StatsReport(
        mode=effective,
        discipline=discipline,
        summaries=summaries,
        trend=build_trend_line(
            summaries, effective, discipline, config.trend_window,
            config.report_decimals,
        ),
        series_stats=series_stats(selected, config.report_decimals),
        shot_distribution=shot_distribution(
            sorted(selected, key=lambda s: s.date), config.report_decimals
        ),
        wellbeing=points,
        quality=quality_points(selected),
        correlations={m: wellbeing_correlation(points, m) for m in WELLBEING_METRICS},
        series_score_max=discipline.max_series_score if discipline else None,
    )

    logger.info(
        f"Report built: {len(selected)} sessions, "
        f"{len(report.shot_distribution)} with shots, mode={effective.value}"
    )
    return report
