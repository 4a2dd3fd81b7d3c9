"""
Session models for shotstats.

A session is one training or competition outing: a dated set of series,
optionally attached to a discipline and to a self-reported wellbeing entry.
Records are built from query results right before computation and are
never mutated.
"""

from dataclasses import dataclass, field, asdict
from datetime import date as date_cls, datetime, timezone
from typing import Optional

from shotstats.models.discipline import Discipline
from shotstats.models.series import SeriesResult
from shotstats.utils.constants import DEFAULT_SHOTS_PER_SERIES, SESSION_TYPE_TRAINING


def _to_datetime(value) -> datetime:
    """Parse a session date into a naive datetime.

    Timezone-aware values are converted to UTC first, so aware and naive
    dates order and compare consistently.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date_cls):
        moment = datetime(value.year, value.month, value.day)
    else:
        moment = datetime.fromisoformat(str(value))
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


@dataclass(frozen=True)
class Wellbeing:
    """Self-reported state before a session (each on the host's rating scale)."""
    sleep: int
    energy: int
    stress: int
    motivation: int

    @classmethod
    def from_dict(cls, data: dict) -> "Wellbeing":
        return cls(
            sleep=int(data["sleep"]),
            energy=int(data["energy"]),
            stress=int(data["stress"]),
            motivation=int(data["motivation"]),
        )


@dataclass(frozen=True)
class SessionRecord:
    """A session snapshot as supplied by the host's query layer.

    Attributes:
        id: Host identifier of the session.
        date: When the session took place.
        type: Session type ("TRAINING", "WETTKAMPF", ...).
        discipline: Discipline descriptor, None for sessions without one.
        series: All series of the session, practice series included.
        wellbeing: Wellbeing entry, if one was recorded.
    """
    id: str
    date: datetime
    type: str = SESSION_TYPE_TRAINING
    discipline: Optional[Discipline] = None
    series: tuple[SeriesResult, ...] = field(default_factory=tuple)
    wellbeing: Optional[Wellbeing] = None

    def __post_init__(self):
        object.__setattr__(self, "date", _to_datetime(self.date))

    @classmethod
    def from_dict(
        cls,
        data: dict,
        default_shots_per_series: int = DEFAULT_SHOTS_PER_SERIES,
    ) -> "SessionRecord":
        """Create a SessionRecord from a plain mapping (camelCase or snake_case).

        Series without recorded shots or an explicit shot count get the
        discipline's shots per series, or ``default_shots_per_series``
        when the session has no discipline.
        """
        discipline = data.get("discipline")
        if isinstance(discipline, dict):
            discipline = Discipline.from_dict(discipline)

        fallback = (
            discipline.shots_per_series if discipline else default_shots_per_series
        )
        series = tuple(
            s if isinstance(s, SeriesResult)
            else SeriesResult.from_dict(s, default_shot_count=fallback)
            for s in data.get("series", ())
        )

        wellbeing = data.get("wellbeing")
        if isinstance(wellbeing, dict):
            wellbeing = Wellbeing.from_dict(wellbeing)

        return cls(
            id=str(data["id"]),
            date=_to_datetime(data["date"]),
            type=data.get("type", SESSION_TYPE_TRAINING),
            discipline=discipline,
            series=series,
            wellbeing=wellbeing,
        )

    @property
    def discipline_id(self) -> Optional[str]:
        return self.discipline.id if self.discipline else None


@dataclass(frozen=True)
class SessionSummary:
    """Scored totals of one session.

    Attributes:
        session_id: Host identifier of the session.
        date: Session date.
        type: Session type.
        discipline: Discipline descriptor, if any.
        total_score: Sum of scored non-practice series, None when nothing
                     was scored.
        avg_per_shot: total_score / total_non_practice_shots, None when no
                      shots were counted.
        total_non_practice_shots: Shots of the scored non-practice series.
    """
    session_id: str
    date: datetime
    type: str
    discipline: Optional[Discipline]
    total_score: Optional[float]
    avg_per_shot: Optional[float]
    total_non_practice_shots: int

    @property
    def discipline_id(self) -> Optional[str]:
        return self.discipline.id if self.discipline else None

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "date": self.date.isoformat(),
            "type": self.type,
            "discipline_id": self.discipline_id,
            "total_score": self.total_score,
            "avg_per_shot": self.avg_per_shot,
            "total_non_practice_shots": self.total_non_practice_shots,
        }


@dataclass(frozen=True)
class ShotDistributionRow:
    """Share of a session's shots per ring, in percent (index = ring)."""
    session_id: str
    date: datetime
    discipline_id: Optional[str]
    total_shots: int
    percentages: tuple[float, ...]

    def to_dict(self) -> dict:
        row = {
            "session_id": self.session_id,
            "date": self.date.isoformat(),
            "discipline_id": self.discipline_id,
            "total_shots": self.total_shots,
        }
        for ring, pct in enumerate(self.percentages):
            row[f"r{ring}"] = pct
        return row


@dataclass(frozen=True)
class WellbeingPoint:
    """Per-shot rate of a session next to its wellbeing entry."""
    avg_per_shot: float
    discipline_id: Optional[str]
    sleep: int
    energy: int
    stress: int
    motivation: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TrendPoint:
    """One point of the results chart: displayed value and its trend."""
    date: datetime
    value: float
    trend: Optional[float]

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "value": self.value, "trend": self.trend}


@dataclass(frozen=True)
class StatsFilters:
    """Session filters of the statistics view ("all" or None disables one)."""
    type: Optional[str] = None
    date_from: Optional[date_cls] = None
    date_to: Optional[date_cls] = None
    discipline_id: Optional[str] = None
