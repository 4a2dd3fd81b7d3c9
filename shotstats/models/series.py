"""
Series-level data models for shotstats.

SeriesResult: One series as loaded by the host's query layer.
SeriesStats: Aggregate of one series position across many sessions.
QualityPoint: Execution quality versus per-shot score of a single series.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Union
from decimal import Decimal

from shotstats.scoring import resolve_series_shot_count
from shotstats.utils.constants import DEFAULT_SHOTS_PER_SERIES

ScoreValue = Union[int, float, Decimal, str, None]


@dataclass(frozen=True)
class SeriesResult:
    """A series of shots scored as a unit.

    Attributes:
        position: Absolute position of the series within its session (>= 1).
        score_total: Accepted series score as number or decimal string,
                     None when the series has not been scored yet.
        is_practice: Practice series never count toward any aggregate.
        shot_count: Shots fired in the series.
        shots: Individual shot values as entered, if recorded.
        execution_quality: Self-rated execution quality, if recorded.
    """
    position: int
    score_total: ScoreValue = None
    is_practice: bool = False
    shot_count: int = DEFAULT_SHOTS_PER_SERIES
    shots: Optional[tuple[str, ...]] = None
    execution_quality: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict,
                  default_shot_count: int = DEFAULT_SHOTS_PER_SERIES) -> "SeriesResult":
        """Create a SeriesResult from a plain mapping (camelCase or snake_case).

        The shot count is taken from ``shot_count``/``shotCount`` when given,
        otherwise from the length of the recorded shot list or
        ``default_shot_count``. Only string entries are kept as shot values.
        """
        raw_shots = data.get("shots")
        if not isinstance(raw_shots, (list, tuple)):
            raw_shots = None

        shot_count = data.get("shot_count", data.get("shotCount"))
        if shot_count is None:
            shot_count = resolve_series_shot_count(raw_shots, default_shot_count)

        shots = None
        if raw_shots is not None:
            shots = tuple(s for s in raw_shots if isinstance(s, str))

        return cls(
            position=int(data["position"]),
            score_total=data.get("score_total", data.get("scoreTotal")),
            is_practice=bool(data.get("is_practice", data.get("isPractice", False))),
            shot_count=int(shot_count),
            shots=shots,
            execution_quality=data.get(
                "execution_quality", data.get("executionQuality")
            ),
        )


@dataclass(frozen=True)
class SeriesStats:
    """Min/max/average of one series position across sessions.

    Attributes:
        position: Series position the values were grouped by.
        min: Lowest series score at this position.
        max: Highest series score at this position.
        avg: Mean series score, rounded to one decimal.
        count: Number of sessions contributing a value.
    """
    position: int
    min: float
    max: float
    avg: float
    count: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class QualityPoint:
    """Execution quality of a series against its per-shot score."""
    quality: int
    score_per_shot: float
    discipline_id: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)
