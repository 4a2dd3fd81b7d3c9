"""
shotstats: scoring and statistics engine for shooting-sport training diaries.
"""

from shotstats.buckets import bucketize, distribution_row, shot_distribution, to_percent
from shotstats.normalize import (
    DisplayMode,
    display_value,
    effective_display_mode,
    per_shot_rate,
    project,
    project_series,
)
from shotstats.pipeline import StatsReport, build_report, build_trend_line, load_sessions
from shotstats.scoring import (
    average,
    parse_score,
    parse_shot,
    resolve_series_shot_count,
    sum_from_shots,
    total_score,
)
from shotstats.series_stats import series_stats
from shotstats.summary import (
    filter_sessions,
    quality_points,
    summarize_session,
    summarize_sessions,
    wellbeing_correlation,
    wellbeing_points,
)
from shotstats.trends import moving_average

__version__ = "0.1.0"
