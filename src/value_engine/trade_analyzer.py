"""Trade fairness analysis over two sides of a proposed trade.

Side A's share of the combined contextual value decides the verdict::

    fairness = team_a_value / (team_a_value + team_b_value) * 100

A share within 5 points of 50 is fair, within 12 a slight advantage,
anything further a lopsided win.
"""

import logging
from typing import List, Optional, Sequence

from src.league_settings.settings import LeagueSettings
from src.rounding import round_half_up
from src.value_engine.config import FAIR_BAND, SLIGHT_BAND, YOUTH_GAP_YEARS
from src.value_engine.formatting import format_value
from src.value_engine.models import Player, TradeAnalysis
from src.value_engine.multipliers import get_confidence_score
from src.value_engine.value_calculator import PlayerValueEngine

logger = logging.getLogger(__name__)

TEAM_A = "Team A"
TEAM_B = "Team B"


class TradeAnalyzer:
    """Compare what each side of a trade receives."""

    def __init__(self, engine: PlayerValueEngine):
        self.engine = engine

    def analyze_trade(
        self,
        team_a_players: Sequence[Player],
        team_b_players: Sequence[Player],
        settings: Optional[LeagueSettings] = None,
    ) -> TradeAnalysis:
        """Classify a trade and explain who comes out ahead.

        Args:
            team_a_players: Assets Team A receives, valued with side A's
                strategy and needs.
            team_b_players: Assets Team B receives, valued with side B's.
            settings: League settings; defaults when omitted.
        """
        settings = settings or LeagueSettings()

        team_a_value = self.engine.calculate_side_value_with_context(
            team_a_players, settings, "A"
        )
        team_b_value = self.engine.calculate_side_value_with_context(
            team_b_players, settings, "B"
        )

        fairness = self.calculate_fairness(team_a_value, team_b_value)
        label, css_class = self.get_fairness_label(fairness)

        value_diff = abs(team_a_value - team_b_value)
        if value_diff == 0:
            explanation = "Values are perfectly balanced"
        else:
            winner = TEAM_A if team_a_value > team_b_value else TEAM_B
            explanation = f"{winner} receives {format_value(value_diff)} more in value"

        all_players = list(team_a_players) + list(team_b_players)
        confidence = 0
        if all_players:
            confidence = round_half_up(
                sum(get_confidence_score(p) for p in all_players) / len(all_players)
            )

        logger.info(
            "Trade analyzed: A=%d B=%d fairness=%.1f%% (%s)",
            team_a_value, team_b_value, fairness, label,
        )

        return TradeAnalysis(
            team_a_value=team_a_value,
            team_b_value=team_b_value,
            fairness_percent=fairness,
            label=label,
            css_class=css_class,
            explanation=explanation,
            confidence=confidence,
            value_diff=value_diff,
            recommendations=self.get_recommendations(team_a_players, team_b_players),
        )

    @staticmethod
    def calculate_fairness(team_a_value: int, team_b_value: int) -> float:
        """Team A's percentage of the combined value; 50 for an empty trade."""
        total = team_a_value + team_b_value
        if total <= 0:
            return 50.0
        return team_a_value / total * 100

    @staticmethod
    def get_fairness_label(fairness_percent: float) -> tuple:
        """Return ``(label, css_class)`` for a fairness percentage."""
        diff = abs(fairness_percent - 50)
        if diff <= FAIR_BAND:
            return "Fair Trade", "fair"

        winner = TEAM_A if fairness_percent > 50 else TEAM_B
        if diff <= SLIGHT_BAND:
            return f"Slight advantage {winner}", "slight"
        return f"{winner} wins big", "unfair"

    @staticmethod
    def get_recommendations(
        team_a_players: Sequence[Player], team_b_players: Sequence[Player]
    ) -> List[str]:
        """Notes about the shape of the trade beyond raw value.

        Currently flags a side that gets markedly younger. Picks carry no
        age and are left out of the averages.
        """
        ages_a = [p.age for p in team_a_players if p.age and not p.is_pick]
        ages_b = [p.age for p in team_b_players if p.age and not p.is_pick]
        if not ages_a or not ages_b:
            return []

        avg_a = sum(ages_a) / len(ages_a)
        avg_b = sum(ages_b) / len(ages_b)

        if avg_a < avg_b - YOUTH_GAP_YEARS:
            return [f"{TEAM_A} is getting younger players - good for rebuilding"]
        if avg_b < avg_a - YOUTH_GAP_YEARS:
            return [f"{TEAM_B} is getting younger players - good for rebuilding"]
        return []
