"""
Discipline definitions for shotstats.

A discipline describes the course of fire (e.g. "Luftgewehr 60") and its
scoring type. It is read-only context supplied by the host's discipline
catalog and is only used for shot-count fallbacks and projection.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from shotstats.utils.constants import MAX_SHOT_TENTH, MAX_SHOT_WHOLE
from shotstats.utils.rounding import round_half_up, to_decimal


class ScoringType(str, Enum):
    """How shots on a discipline's target are scored."""
    WHOLE = "WHOLE"   # integer rings 0-10
    TENTH = "TENTH"   # tenth rings 0.0-10.9


@dataclass(frozen=True)
class Discipline:
    """Course of fire with the properties the engine needs.

    Attributes:
        id: Catalog identifier.
        name: Display name.
        series_count: Number of scored series in a full course.
        shots_per_series: Shots fired per series.
        scoring_type: Whole-ring or tenth-ring scoring.
    """

    id: str
    name: str
    series_count: int
    shots_per_series: int
    scoring_type: ScoringType = ScoringType.WHOLE

    @classmethod
    def from_dict(cls, data: dict) -> "Discipline":
        """Create a Discipline from a catalog mapping (camelCase or snake_case)."""
        scoring_type = data.get("scoring_type", data.get("scoringType", "WHOLE"))
        if isinstance(scoring_type, str):
            scoring_type = ScoringType(scoring_type)
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            series_count=int(data.get("series_count", data.get("seriesCount"))),
            shots_per_series=int(
                data.get("shots_per_series", data.get("shotsPerSeries"))
            ),
            scoring_type=scoring_type,
        )

    @property
    def is_decimal(self) -> bool:
        return self.scoring_type == ScoringType.TENTH

    @property
    def total_shots(self) -> int:
        """Shots in a full course (practice series excluded)."""
        return self.series_count * self.shots_per_series

    @property
    def max_series_score(self) -> float:
        """Highest score a single series can reach (series chart bound)."""
        per_shot = MAX_SHOT_TENTH if self.is_decimal else MAX_SHOT_WHOLE
        return round_half_up(to_decimal(per_shot) * self.shots_per_series, 1)


def is_decimal_scoring(discipline: Optional[Discipline]) -> bool:
    """True when shots should be floored into rings (tenth-ring scoring)."""
    return discipline is not None and discipline.is_decimal
