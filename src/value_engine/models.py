"""Data models for the dynasty value engine."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Player:
    """A rostered player or a draft pick (``position == "PICK"``)."""

    id: int
    name: str
    position: str
    dynasty_value: int
    team: str = ""
    age: Optional[int] = None
    contract_years: Optional[int] = None
    rankings: Dict[str, int] = field(default_factory=dict)

    @property
    def is_pick(self) -> bool:
        return self.position == "PICK"

    @classmethod
    def from_dict(cls, data: Dict) -> "Player":
        """Build from a dataset record (camelCase keys)."""
        contract = data.get("contract") or {}
        age = data.get("age")
        return cls(
            id=int(data["id"]),
            name=data["name"],
            position=data["position"],
            dynasty_value=int(data.get("dynastyValue") or 0),
            team=data.get("team") or "",
            age=int(age) if age else None,
            contract_years=contract.get("years"),
            rankings=dict(data.get("rankings") or {}),
        )

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "team": self.team,
            "position": self.position,
            "age": self.age or 0,
            "dynastyValue": self.dynasty_value,
            "contract": {"years": self.contract_years},
            "rankings": dict(self.rankings),
        }


@dataclass(frozen=True)
class ValueTrend:
    """Expected direction of a player's value from their age curve."""

    direction: str  # "up", "stable", "down"
    change: int     # percent
    label: str = ""


STABLE_TREND = ValueTrend(direction="stable", change=0, label="")


@dataclass(frozen=True)
class PickDetails:
    """How a draft pick's value was derived."""

    year: int
    round: int
    future_discount: float
    round_multiplier: float
    format_adj: int
    future_adj: int


@dataclass(frozen=True)
class ValueBreakdown:
    """Adjusted dynasty value decomposed into its adjustments.

    For players ``total == base + scarcity_adj + age_adj + scoring_adj +
    format_adj + contract_adj`` (plus ``strategy_adj + needs_adj`` once a
    trade side is applied). ``trend_adj`` is advisory and not part of
    ``total``.
    """

    base: int
    total: int
    scarcity_adj: int = 0
    age_adj: int = 0
    scoring_adj: int = 0
    format_adj: int = 0
    contract_adj: int = 0
    strategy_adj: int = 0
    needs_adj: int = 0
    trend_adj: int = 0
    trend: ValueTrend = STABLE_TREND
    confidence: int = 95
    pick_details: Optional[PickDetails] = None


@dataclass(frozen=True)
class TradeAnalysis:
    """Fairness verdict for a two-sided trade."""

    team_a_value: int
    team_b_value: int
    fairness_percent: float
    label: str
    css_class: str  # "fair", "slight", "unfair"
    explanation: str
    confidence: int
    value_diff: int
    recommendations: List[str] = field(default_factory=list)
