"""Dynasty value engine: adjusted player and pick values with full breakdown.

Starts from each player's consensus dynasty value and layers independent
adjustments on top, each computed against the unadjusted base:

* **Scarcity** - depth-chart rank relative to the league's replacement level.
* **Age** - distance from the positional peak age, scaled by format.
* **Scoring** - reception boost for PPR / half-PPR.
* **Format** - QB value in superflex / 2QB leagues, plus TE premium.
* **Contract** - years of team control (dynasty only).

Team strategy and positional need are applied per trade side on top of that
by :meth:`PlayerValueEngine.get_contextual_value`.
"""

import dataclasses
import logging
import re
from datetime import datetime
from typing import Iterable, Optional

from src.league_settings.settings import LeagueSettings
from src.rounding import round_half_up
from src.value_engine.config import (
    DEFAULT_CONTRACT_YEARS,
    LATE_ROUND_PICK_MULTIPLIER,
    PICK_CONFIDENCE,
    PICK_ROUND_MULTIPLIERS,
    PICK_YEARLY_DISCOUNT,
    QB_BASELINE_MULTIPLIER,
)
from src.value_engine.models import PickDetails, Player, ValueBreakdown
from src.value_engine.multipliers import (
    get_age_multiplier,
    get_confidence_score,
    get_contract_multiplier,
    get_needs_multiplier,
    get_scarcity_multiplier,
    get_strategy_multiplier,
    get_value_trend,
)
from src.value_engine.player_pool import PlayerPool

logger = logging.getLogger(__name__)

_PICK_YEAR_PATTERN = re.compile(r"(\d{4})")
_PICK_ROUND_PATTERN = re.compile(r"(\d+)\.")


class PlayerValueEngine:
    """Compute adjusted dynasty values for players in a :class:`PlayerPool`.

    The engine holds no settings: every call takes the current
    :class:`LeagueSettings`, so one engine can serve many sessions.
    """

    def __init__(self, pool: PlayerPool, current_year: Optional[int] = None):
        self.pool = pool
        self.current_year = current_year or datetime.now().year

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_player_value_breakdown(
        self, player: Player, settings: Optional[LeagueSettings] = None
    ) -> ValueBreakdown:
        """Context-free adjusted value of *player* with every adjustment listed."""
        settings = settings or LeagueSettings()

        if player.is_pick:
            return self._pick_breakdown(player, settings)

        base = player.dynasty_value
        multipliers = settings.multipliers

        scarcity_mult = get_scarcity_multiplier(
            player.position,
            self.pool.position_rank(player),
            settings.replacement_levels,
        )
        scarcity_adj = round_half_up(base * (scarcity_mult - 1))

        age_mult = get_age_multiplier(player.age, player.position, multipliers.age_weight)
        age_adj = round_half_up(base * (age_mult - 1))

        scoring_mult = multipliers.scoring.get(player.position.lower(), 1.0)
        scoring_adj = round_half_up(base * (scoring_mult - 1))

        format_adj = 0
        if player.position == "QB":
            format_adj = round_half_up(base * (multipliers.qb - QB_BASELINE_MULTIPLIER))
        elif player.position == "TE" and multipliers.te > 1:
            format_adj = round_half_up(base * (multipliers.te - 1))

        years = player.contract_years
        contract_mult = get_contract_multiplier(
            DEFAULT_CONTRACT_YEARS if years is None else years,
            settings.league_format,
        )
        contract_adj = round_half_up(base * (contract_mult - 1))

        trend = get_value_trend(player)
        trend_adj = round_half_up(base * trend.change / 100)

        # trend_adj is advisory only and stays out of the total
        total = base + scarcity_adj + age_adj + scoring_adj + format_adj + contract_adj

        return ValueBreakdown(
            base=base,
            total=total,
            scarcity_adj=scarcity_adj,
            age_adj=age_adj,
            scoring_adj=scoring_adj,
            format_adj=format_adj,
            contract_adj=contract_adj,
            trend_adj=trend_adj,
            trend=trend,
            confidence=get_confidence_score(player),
        )

    def get_contextual_value(
        self,
        player: Player,
        settings: Optional[LeagueSettings] = None,
        side: str = "A",
    ) -> ValueBreakdown:
        """Breakdown adjusted for one trade side's strategy and needs.

        Args:
            side: ``"A"`` or ``"B"``; anything other than ``"A"`` is side B.
        """
        settings = settings or LeagueSettings()
        breakdown = self.get_player_value_breakdown(player, settings)
        context = settings.team_context

        strategy_mult = get_strategy_multiplier(
            player, context.strategy_for(side), context.risk_tolerance
        )
        strategy_adj = round_half_up(breakdown.base * (strategy_mult - 1))

        needs_mult = get_needs_multiplier(player, settings.needs_for(side))
        needs_adj = round_half_up(breakdown.base * (needs_mult - 1))

        return dataclasses.replace(
            breakdown,
            strategy_adj=strategy_adj,
            needs_adj=needs_adj,
            total=breakdown.total + strategy_adj + needs_adj,
        )

    def calculate_side_value(
        self, players: Iterable[Player], settings: Optional[LeagueSettings] = None
    ) -> int:
        """Sum of context-free totals."""
        return sum(self.get_player_value_breakdown(p, settings).total for p in players)

    def calculate_side_value_with_context(
        self,
        players: Iterable[Player],
        settings: Optional[LeagueSettings] = None,
        side: str = "A",
    ) -> int:
        """Sum of totals adjusted for *side*'s strategy and needs."""
        return sum(self.get_contextual_value(p, settings, side).total for p in players)

    def get_replacement_value(
        self, position: str, settings: Optional[LeagueSettings] = None
    ) -> int:
        settings = settings or LeagueSettings()
        return self.pool.get_replacement_value(position, settings.replacement_levels)

    # ------------------------------------------------------------------
    # Draft picks
    # ------------------------------------------------------------------

    def get_pick_details(self, pick: Player, settings: LeagueSettings) -> PickDetails:
        """Parse year and round from the pick name and derive its discounts.

        A name without a year is treated as a current-year pick; a name
        without a round as a first-rounder.
        """
        base = pick.dynasty_value
        format_mult = settings.multipliers.pick_multiplier

        year_match = _PICK_YEAR_PATTERN.search(pick.name)
        pick_year = int(year_match.group(1)) if year_match else self.current_year
        future_discount = PICK_YEARLY_DISCOUNT ** max(0, pick_year - self.current_year)

        round_match = _PICK_ROUND_PATTERN.search(pick.name)
        pick_round = int(round_match.group(1)) if round_match else 1

        return PickDetails(
            year=pick_year,
            round=pick_round,
            future_discount=future_discount,
            round_multiplier=PICK_ROUND_MULTIPLIERS.get(pick_round, LATE_ROUND_PICK_MULTIPLIER),
            format_adj=round_half_up(base * (format_mult - 1)),
            future_adj=round_half_up(base * (future_discount - 1)),
        )

    def _pick_breakdown(self, pick: Player, settings: LeagueSettings) -> ValueBreakdown:
        details = self.get_pick_details(pick, settings)
        base = pick.dynasty_value
        # round_multiplier is reported only, never applied to total
        total = round_half_up(
            base * settings.multipliers.pick_multiplier * details.future_discount
        )
        logger.debug(
            "Pick %s: year=%d round=%d discount=%.3f total=%d",
            pick.name, details.year, details.round, details.future_discount, total,
        )
        return ValueBreakdown(
            base=base,
            total=total,
            confidence=PICK_CONFIDENCE,
            pick_details=details,
        )
