"""League settings model - the context every value computation is run against.

Settings are mutable per session. The derived ``multipliers`` and
``replacement_levels`` are recomputed on every access so they always reflect
the current settings; they are never persisted.
"""

import copy
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Optional

from src.league_settings.config import (
    AGE_WEIGHTS,
    DEFAULT_SETTINGS,
    FLEX_SHARES,
    PICK_MULTIPLIERS,
    QB_FORMAT_MULTIPLIERS,
    REPLACEMENT_BUFFER,
    SCORING_MULTIPLIERS,
    TE_PREMIUM_MULTIPLIER,
    VALID_FORMATS,
    VALID_QB_FORMATS,
    VALID_RANKING_SOURCES,
    VALID_SCORING,
    VALID_STRATEGIES,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Multipliers:
    """Format-driven value multipliers derived from a LeagueSettings."""

    scoring: Dict[str, float]
    qb: float
    te: float
    pick_multiplier: float
    age_weight: float


@dataclass
class TeamContext:
    """Trade-side strategies and shared risk tolerance."""

    team_a_strategy: str = "neutral"
    team_b_strategy: str = "neutral"
    risk_tolerance: float = 0.5

    def strategy_for(self, side: str) -> str:
        return self.team_a_strategy if side == "A" else self.team_b_strategy


def derive_multipliers(
    scoring: str, league_format: str, qb_format: str, te_premium: bool
) -> Multipliers:
    """Build the multiplier tables for a scoring/format/QB/TE combination.

    Unknown values fall back to the neutral entry of each table.
    """
    format_key = league_format if league_format in PICK_MULTIPLIERS else "dynasty"
    return Multipliers(
        scoring=dict(SCORING_MULTIPLIERS.get(scoring, SCORING_MULTIPLIERS["standard"])),
        qb=QB_FORMAT_MULTIPLIERS.get(qb_format, QB_FORMAT_MULTIPLIERS["1qb"]),
        te=TE_PREMIUM_MULTIPLIER if te_premium else 1.0,
        pick_multiplier=PICK_MULTIPLIERS[format_key],
        age_weight=AGE_WEIGHTS[format_key],
    )


def derive_replacement_levels(
    league_size: int, starters: Dict[str, int]
) -> Dict[str, float]:
    """Roster depth (by position rank) beyond which players are replaceable.

    Formula::

        level = league_size * (starters + flex_share) + ceil(league_size * 0.25)

    FLEX slots are split 0.4 RB / 0.4 WR / 0.2 TE; SUPERFLEX slots count
    fully toward QB.
    """
    buffer = math.ceil(league_size * REPLACEMENT_BUFFER)
    flex = starters.get("flex", 0) or 0
    superflex = starters.get("superflex", 0) or 0
    return {
        "qb": league_size * (starters.get("qb", 0) + superflex) + buffer,
        "rb": league_size * (starters.get("rb", 0) + flex * FLEX_SHARES["rb"]) + buffer,
        "wr": league_size * (starters.get("wr", 0) + flex * FLEX_SHARES["wr"]) + buffer,
        "te": league_size * (starters.get("te", 0) + flex * FLEX_SHARES["te"]) + buffer,
    }


def _default(key: str):
    return copy.deepcopy(DEFAULT_SETTINGS[key])


@dataclass
class LeagueSettings:
    """User-configurable league context."""

    scoring: str = "half-ppr"
    league_format: str = "dynasty"
    qb_format: str = "1qb"
    te_premium: bool = False
    idp: bool = False
    league_size: int = 12
    starters: Dict[str, int] = field(default_factory=lambda: _default("starters"))
    ranking_source: str = "consensus"
    ranking_blend: Optional[Dict] = None
    team_context: TeamContext = field(default_factory=TeamContext)
    team_a_needs: Dict[str, float] = field(default_factory=lambda: _default("teamANeeds"))
    team_b_needs: Dict[str, float] = field(default_factory=lambda: _default("teamBNeeds"))

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def multipliers(self) -> Multipliers:
        return derive_multipliers(
            self.scoring, self.league_format, self.qb_format, self.te_premium
        )

    @property
    def replacement_levels(self) -> Dict[str, float]:
        return derive_replacement_levels(self.league_size, self.starters)

    def needs_for(self, side: str) -> Dict[str, float]:
        """Position needs for trade side ``'A'`` or ``'B'``."""
        return self.team_a_needs if side == "A" else self.team_b_needs

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, key: str, value) -> None:
        """Replace a single top-level setting (persisted key name)."""
        merged = self.to_dict()
        if key not in merged:
            raise KeyError(f"Unknown setting: {key!r}")
        merged[key] = value
        self._assign(LeagueSettings.from_dict(merged))

    def update_nested(self, key: str, nested_key: str, value) -> None:
        """Replace one entry of a nested setting such as ``starters``."""
        merged = self.to_dict()
        if not isinstance(merged.get(key), dict):
            raise KeyError(f"Setting {key!r} is not a nested mapping")
        merged[key] = {**merged[key], nested_key: value}
        self._assign(LeagueSettings.from_dict(merged))

    def reset(self) -> None:
        """Restore every setting to its default."""
        self._assign(LeagueSettings())
        logger.info("League settings reset to defaults")

    def _assign(self, other: "LeagueSettings") -> None:
        self.__dict__.update(other.__dict__)

    # ------------------------------------------------------------------
    # Persistence format
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict:
        """Convert to the flat camelCase persistence format."""
        return {
            "scoring": self.scoring,
            "format": self.league_format,
            "qbFormat": self.qb_format,
            "tePremium": self.te_premium,
            "idp": self.idp,
            "leagueSize": self.league_size,
            "starters": dict(self.starters),
            "rankingSource": self.ranking_source,
            "rankingBlend": dict(self.ranking_blend) if self.ranking_blend else None,
            "teamContext": {
                "teamAStrategy": self.team_context.team_a_strategy,
                "teamBStrategy": self.team_context.team_b_strategy,
                "riskTolerance": self.team_context.risk_tolerance,
            },
            "teamANeeds": dict(self.team_a_needs),
            "teamBNeeds": dict(self.team_b_needs),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "LeagueSettings":
        """Build settings from a (possibly partial or outdated) saved object.

        The saved object is merged over the current defaults so fields added
        after it was written pick up their default values. Nested mappings
        are merged one level deep. Values outside their allowed set are
        replaced by the default with a warning.
        """
        merged = migrate_settings(data)

        def _choice(key: str, allowed) -> str:
            value = merged[key]
            if value not in allowed:
                logger.warning(
                    "Invalid %s %r in saved settings, using %r",
                    key, value, DEFAULT_SETTINGS[key],
                )
                return DEFAULT_SETTINGS[key]
            return value

        ctx = merged["teamContext"]
        default_ctx = DEFAULT_SETTINGS["teamContext"]
        strategies = []
        for key in ("teamAStrategy", "teamBStrategy"):
            strategy = ctx.get(key)
            if strategy not in VALID_STRATEGIES:
                logger.warning("Invalid %s %r, using 'neutral'", key, strategy)
                strategy = default_ctx[key]
            strategies.append(strategy)

        return cls(
            scoring=_choice("scoring", VALID_SCORING),
            league_format=_choice("format", VALID_FORMATS),
            qb_format=_choice("qbFormat", VALID_QB_FORMATS),
            te_premium=bool(merged["tePremium"]),
            idp=bool(merged["idp"]),
            league_size=int(merged["leagueSize"]),
            starters=dict(merged["starters"]),
            ranking_source=_choice("rankingSource", VALID_RANKING_SOURCES),
            ranking_blend=dict(merged["rankingBlend"]) if merged["rankingBlend"] else None,
            team_context=TeamContext(
                team_a_strategy=strategies[0],
                team_b_strategy=strategies[1],
                risk_tolerance=float(ctx.get("riskTolerance", default_ctx["riskTolerance"])),
            ),
            team_a_needs=dict(merged["teamANeeds"] or {}),
            team_b_needs=dict(merged["teamBNeeds"] or {}),
        )


def migrate_settings(data: Optional[Dict]) -> Dict:
    """Merge a persisted settings object over the current defaults.

    Unknown keys in *data* are dropped. A ``null`` saved for a setting, or
    for an entry of a nested mapping, keeps the default. Returns a new
    dict; neither input nor defaults are modified.
    """
    merged = copy.deepcopy(DEFAULT_SETTINGS)
    if not data:
        return merged

    for key, value in data.items():
        if key not in merged:
            logger.debug("Dropping unknown setting %r", key)
            continue
        if value is None:
            continue
        if isinstance(merged[key], dict):
            if isinstance(value, dict):
                merged[key] = {
                    **merged[key],
                    **{k: v for k, v in value.items() if v is not None},
                }
            else:
                logger.warning(
                    "Invalid %s %r in saved settings, using defaults", key, value
                )
        else:
            merged[key] = value

    return merged
