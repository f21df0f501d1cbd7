"""Data models for the rookie scoring engine."""

from dataclasses import dataclass, field
from typing import Dict, Optional


def _optional_float(value) -> Optional[float]:
    if value is None:
        return None
    # NaN from pandas-loaded datasets counts as missing
    value = float(value)
    return None if value != value else value


@dataclass(frozen=True)
class Rookie:
    """A single draft-class prospect."""

    id: int
    name: str
    year: int
    position: str
    school: Optional[str] = None
    height_in: Optional[float] = None
    weight_lb: Optional[float] = None
    forty: Optional[float] = None
    breakout_age: Optional[float] = None
    iq: float = 0.0
    route_running: float = 0.0
    vision: float = 0.0
    ball_skills: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict) -> "Rookie":
        """Build from a dataset record (camelCase keys)."""
        return cls(
            id=data["id"],
            name=data["name"],
            year=int(data["year"]),
            position=data["position"],
            school=data.get("school"),
            height_in=_optional_float(data.get("heightIn")),
            weight_lb=_optional_float(data.get("weightLb")),
            forty=_optional_float(data.get("forty")),
            breakout_age=_optional_float(data.get("breakoutAge")),
            iq=float(data["iq"]),
            route_running=float(data["routeRunning"]),
            vision=float(data["vision"]),
            ball_skills=float(data["ballSkills"]),
        )

    @property
    def traits(self) -> Dict[str, float]:
        return {
            "iq": self.iq,
            "routeRunning": self.route_running,
            "vision": self.vision,
            "ballSkills": self.ball_skills,
        }


@dataclass(frozen=True)
class MeasurableRange:
    """Observed min/max for one measurable; ``None`` bounds mean no data."""

    min: Optional[float] = None
    max: Optional[float] = None

    @property
    def is_degenerate(self) -> bool:
        return self.min is None or self.max is None or self.min == self.max


@dataclass(frozen=True)
class ScoredRookie:
    """A rookie with its computed scores and optional rank."""

    rookie: Rookie
    overall: float
    trait_score: float
    measurables_score: float
    breakdown: Dict[str, Optional[float]] = field(default_factory=dict)
    rank: Optional[int] = None
    rank_label: Optional[str] = None

    # Convenience passthroughs used by ranking and filtering
    @property
    def name(self) -> str:
        return self.rookie.name

    @property
    def year(self) -> int:
        return self.rookie.year

    @property
    def position(self) -> str:
        return self.rookie.position

    @property
    def school(self) -> Optional[str]:
        return self.rookie.school
