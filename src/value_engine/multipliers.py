"""Value multipliers applied by the dynasty value engine.

Every function here is a pure lookup of a hand-tuned tier table in
``src.value_engine.config``. Positions a table does not know get the
neutral multiplier of 1.0.
"""

import math
from typing import Dict, List, Mapping, Optional

from src.league_settings.config import RANKING_SOURCES
from src.rounding import round_half_up
from src.value_engine.config import (
    AGE_CURVE,
    AGELESS_POSITIONS,
    BELOW_REPLACEMENT_MULTIPLIER,
    CONFIDENCE_STEPS,
    CONTENDER_PICK_MULTIPLIER,
    CONTRACT_STEPS,
    DEEP_BENCH_MULTIPLIER,
    DEFAULT_PEAK_AGE,
    DEFAULT_REPLACEMENT_RANK,
    ELITE_MULTIPLIER,
    ELITE_RANK,
    LATE_CAREER_MULTIPLIER,
    MIN_CONFIDENCE,
    NEEDS_WEIGHT,
    PEAK_AGES,
    PICK_CONFIDENCE,
    REBUILDER_PICK_MULTIPLIER,
    SCARCITY_POSITIONS,
    SHORT_CONTRACT_MULTIPLIER,
    STARTER_MULTIPLIER,
    STARTER_RANK,
    UPPER_HALF_MULTIPLIER,
    VALUED_POSITIONS,
)
from src.value_engine.models import STABLE_TREND, Player, ValueTrend


def peak_age(position: str) -> int:
    return PEAK_AGES.get(position, DEFAULT_PEAK_AGE)


def get_scarcity_multiplier(
    position: str,
    position_rank: Optional[int],
    replacement_levels: Mapping[str, float],
) -> float:
    """Multiplier from a player's depth-chart rank relative to replacement.

    Tiers: top 5, top 10, top half of replacement depth, at or above
    replacement, within 1.5x replacement, beyond.
    """
    if position not in SCARCITY_POSITIONS or not position_rank:
        return 1.0

    replacement_rank = replacement_levels.get(position.lower()) or DEFAULT_REPLACEMENT_RANK

    if position_rank <= ELITE_RANK:
        return ELITE_MULTIPLIER
    if position_rank <= STARTER_RANK:
        return STARTER_MULTIPLIER
    if position_rank <= replacement_rank * 0.5:
        return UPPER_HALF_MULTIPLIER
    if position_rank <= replacement_rank:
        return 1.0
    if position_rank <= replacement_rank * 1.5:
        return BELOW_REPLACEMENT_MULTIPLIER
    return DEEP_BENCH_MULTIPLIER


def get_age_multiplier(
    age: Optional[int], position: str, format_age_weight: float = 1.0
) -> float:
    """Age-curve multiplier, pulled toward 1.0 by *format_age_weight*.

    A weight of 0 (redraft) ignores age entirely.
    """
    if position in AGELESS_POSITIONS or age is None:
        return 1.0

    age_diff = age - peak_age(position)
    multiplier = LATE_CAREER_MULTIPLIER
    for max_diff, step_multiplier in AGE_CURVE:
        if age_diff <= max_diff:
            multiplier = step_multiplier
            break

    return 1 + (multiplier - 1) * format_age_weight


def get_contract_multiplier(years_remaining: int, league_format: str) -> float:
    if league_format != "dynasty":
        return 1.0
    for min_years, multiplier in CONTRACT_STEPS:
        if years_remaining >= min_years:
            return multiplier
    return SHORT_CONTRACT_MULTIPLIER


def get_value_trend(player: Player) -> ValueTrend:
    """Simulated value trajectory from age relative to positional peak."""
    if player.is_pick or player.age is None:
        return STABLE_TREND

    peak = peak_age(player.position)
    if player.age <= peak - 3:
        return ValueTrend("up", 5, "+5%")
    if player.age <= peak:
        return ValueTrend("up", 2, "+2%")
    if player.age <= peak + 2:
        return STABLE_TREND
    if player.age <= peak + 4:
        return ValueTrend("down", -5, "-5%")
    return ValueTrend("down", -10, "-10%")


def _source_ranks(player: Player) -> List[int]:
    return [player.rankings[s] for s in RANKING_SOURCES if player.rankings.get(s) is not None]


def get_confidence_score(player: Player) -> int:
    """Confidence (55-95) from how closely the ranking sources agree.

    Uses the population standard deviation of the four source ranks. A
    player missing any source ranking gets the lowest confidence.
    """
    if player.is_pick:
        return PICK_CONFIDENCE

    ranks = _source_ranks(player)
    if len(ranks) < len(RANKING_SOURCES):
        return MIN_CONFIDENCE

    avg = sum(ranks) / len(ranks)
    std_dev = math.sqrt(sum((r - avg) ** 2 for r in ranks) / len(ranks))

    for max_std, confidence in CONFIDENCE_STEPS:
        if std_dev <= max_std:
            return confidence
    return MIN_CONFIDENCE


def get_effective_ranking(
    player: Player,
    ranking_source: str = "consensus",
    ranking_blend: Optional[Mapping] = None,
) -> int:
    """Rank used for display and sorting under the preferred source.

    * ``"consensus"``: rounded mean of the sources that rank the player,
      0 when none do.
    * ``ranking_blend`` with both sources: weighted mix of the two ranks.
    * a single source name: that source's rank, falling back to DLF.
    """
    rankings = player.rankings

    if ranking_source == "consensus":
        ranks = _source_ranks(player)
        if not ranks:
            return 0
        return round_half_up(sum(ranks) / len(ranks))

    if ranking_blend and ranking_blend.get("source1") and ranking_blend.get("source2"):
        r1 = rankings.get(ranking_blend["source1"]) or 0
        r2 = rankings.get(ranking_blend["source2"]) or 0
        weight = ranking_blend.get("weight") or 0.5
        return round_half_up(r1 * weight + r2 * (1 - weight))

    return rankings.get(ranking_source) or rankings.get("DLF") or 0


def get_strategy_multiplier(
    player: Player, strategy: Optional[str], risk_tolerance: float = 0.5
) -> float:
    """Value swing for a contending or rebuilding team.

    Contenders pay for proven production and discount youth; rebuilders
    pay for youth and picks and discount aging veterans, RBs hardest.
    ``risk_tolerance`` is carried for future tuning and does not affect the
    result yet.
    """
    if strategy not in ("contender", "rebuilder"):
        return 1.0
    if player.position not in VALUED_POSITIONS:
        return 1.0
    if player.is_pick:
        return REBUILDER_PICK_MULTIPLIER if strategy == "rebuilder" else CONTENDER_PICK_MULTIPLIER
    if player.age is None:
        return 1.0

    age = player.age
    position = player.position

    if strategy == "contender":
        if position == "RB" and age >= 28:
            return 1.0
        if age <= 23:
            return 0.92
        if age >= 30 and position != "QB":
            return 0.95
        return 1.05

    # rebuilder
    if age <= 24:
        return 1.12
    if age <= 26:
        return 1.05
    if age >= 29 and position == "RB":
        return 0.75
    if age >= 30:
        return 0.85
    return 0.95


def get_needs_multiplier(player: Player, needs: Optional[Dict[str, float]]) -> float:
    """Boost of up to 20% for a position the receiving team needs.

    Need intensities are clamped into [0, 1].
    """
    if not needs or player.is_pick:
        return 1.0
    need = needs.get(player.position.lower())
    if need is None:
        return 1.0
    return 1 + max(0.0, min(1.0, need)) * NEEDS_WEIGHT
