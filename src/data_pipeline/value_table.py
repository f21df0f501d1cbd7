"""Tabular view of every player's adjusted value.

For the whole pool under one set of league settings:
1. Compute each player's breakdown.
2. Rank players by adjusted total, overall and within position.
"""

import logging
from typing import Optional

import pandas as pd

from src.league_settings.settings import LeagueSettings
from src.value_engine.multipliers import get_effective_ranking
from src.value_engine.value_calculator import PlayerValueEngine

logger = logging.getLogger(__name__)

VALUE_COLUMNS = [
    "player_id", "name", "team", "position", "age",
    "base", "scarcity_adj", "age_adj", "scoring_adj", "format_adj",
    "contract_adj", "trend_adj", "trend", "total", "confidence",
    "effective_rank",
]


class ValueTableBuilder:
    """Build a DataFrame of adjusted values for a player pool."""

    def __init__(self, engine: PlayerValueEngine):
        self.engine = engine

    def build(self, settings: Optional[LeagueSettings] = None) -> pd.DataFrame:
        """Return one row per player sorted by adjusted total (descending).

        Adds ``overall_rank`` and ``position_rank`` (1-based, ties broken by
        pool order).
        """
        settings = settings or LeagueSettings()

        rows = []
        for player in self.engine.pool:
            breakdown = self.engine.get_player_value_breakdown(player, settings)
            rows.append({
                "player_id": player.id,
                "name": player.name,
                "team": player.team,
                "position": player.position,
                "age": player.age,
                "base": breakdown.base,
                "scarcity_adj": breakdown.scarcity_adj,
                "age_adj": breakdown.age_adj,
                "scoring_adj": breakdown.scoring_adj,
                "format_adj": breakdown.format_adj,
                "contract_adj": breakdown.contract_adj,
                "trend_adj": breakdown.trend_adj,
                "trend": breakdown.trend.direction,
                "total": breakdown.total,
                "confidence": breakdown.confidence,
                "effective_rank": (
                    None if player.is_pick
                    else get_effective_ranking(
                        player, settings.ranking_source, settings.ranking_blend
                    )
                ),
            })

        table = pd.DataFrame(rows, columns=VALUE_COLUMNS)
        if table.empty:
            table["overall_rank"] = pd.Series(dtype=int)
            table["position_rank"] = pd.Series(dtype=int)
            return table

        table = table.sort_values("total", ascending=False, kind="stable").reset_index(drop=True)
        table["overall_rank"] = range(1, len(table) + 1)
        table["position_rank"] = table.groupby("position").cumcount() + 1

        logger.info(
            "Built value table: %d players (%s, %s, %s)",
            len(table), settings.scoring, settings.league_format, settings.qb_format,
        )
        logger.debug(
            "Top values: %s",
            ", ".join(f"{r.name}={r.total}" for r in table.head(5).itertuples()),
        )
        return table
