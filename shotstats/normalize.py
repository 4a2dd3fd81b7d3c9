"""
Cross-discipline normalization and projection.

Sessions of different disciplines (or with partial series) are compared by
their per-shot rate. A rate can be projected back onto one discipline's
full course, e.g. "points on a 60-shot air rifle match".

Two display modes:
  - PER_SHOT: the raw rate
  - PROJECTED: rate * shots in a full course, rounded per scoring type

A chart series uses exactly one mode; rates and projections are never
mixed within it.
"""

from enum import Enum
from typing import Optional, Union

from shotstats.models.discipline import Discipline
from shotstats.utils.rounding import round_half_up, round_to_int, to_decimal


class DisplayMode(str, Enum):
    """How score values are presented in a view."""
    PER_SHOT = "per_shot"
    PROJECTED = "projected"


def per_shot_rate(total_score, total_shots: int) -> Optional[float]:
    """Average score per shot, None when no shots were counted."""
    if not total_shots:
        return None
    total = to_decimal(total_score)
    if total is None:
        return None
    return float(total / total_shots)


def _scale(rate, shots: int, discipline: Discipline) -> Union[float, int, None]:
    dec = to_decimal(rate)
    if dec is None:
        return None
    value = dec * shots
    if discipline.is_decimal:
        return round_half_up(value, 1)
    return round_to_int(value)


def project(rate: Optional[float], discipline: Discipline) -> Union[float, int, None]:
    """Project a per-shot rate onto a discipline's full course.

    Tenth-ring disciplines are rounded to one decimal, whole-ring
    disciplines to the nearest integer. A missing rate stays None.
    """
    return _scale(rate, discipline.total_shots, discipline)


def project_series(rate: Optional[float],
                   discipline: Discipline) -> Union[float, int, None]:
    """Project a per-shot rate onto a single series of the discipline."""
    return _scale(rate, discipline.shots_per_series, discipline)


def effective_display_mode(mode: DisplayMode,
                           discipline: Optional[Discipline]) -> DisplayMode:
    """Projection needs one fixed course; without a discipline fall back to rates."""
    if discipline is None:
        return DisplayMode.PER_SHOT
    return DisplayMode(mode)


def display_value(rate: float, mode: DisplayMode,
                  discipline: Optional[Discipline]) -> Union[float, int]:
    """Value shown for a per-shot rate under the given display mode."""
    if effective_display_mode(mode, discipline) == DisplayMode.PROJECTED:
        return project(rate, discipline)
    return rate
