"""Read-only player catalog with per-position depth charts."""

import logging
from functools import cached_property
from typing import Dict, Iterable, List, Optional, Tuple

from src.value_engine.config import DEFAULT_REPLACEMENT_RANK, SCARCITY_POSITIONS
from src.value_engine.models import Player

logger = logging.getLogger(__name__)


class PlayerPool:
    """An immutable snapshot of the player dataset.

    Position groups are derived lazily and memoized on the pool. A new
    dataset means a new pool, so the groups can never go stale.
    """

    def __init__(self, players: Iterable[Player]):
        self.players: Tuple[Player, ...] = tuple(players)

    @classmethod
    def from_records(cls, records: Iterable[Dict]) -> "PlayerPool":
        return cls(Player.from_dict(r) for r in records)

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self):
        return iter(self.players)

    @cached_property
    def position_groups(self) -> Dict[str, List[Player]]:
        """Players of each scarcity position sorted by dynasty value, best first."""
        groups: Dict[str, List[Player]] = {pos: [] for pos in SCARCITY_POSITIONS}
        for player in self.players:
            if player.position in groups:
                groups[player.position].append(player)
        for pos, group in groups.items():
            group.sort(key=lambda p: p.dynasty_value, reverse=True)
            logger.debug("Position group %s: %d players", pos, len(group))
        return groups

    @cached_property
    def _ranks(self) -> Dict[int, int]:
        ranks: Dict[int, int] = {}
        for group in self.position_groups.values():
            for rank, player in enumerate(group, start=1):
                ranks[player.id] = rank
        return ranks

    def position_rank(self, player: Player) -> Optional[int]:
        """1-based rank of *player* within its position, or None if unranked."""
        return self._ranks.get(player.id)

    def get(self, player_id: int) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_replacement_value(
        self, position: str, replacement_levels: Dict[str, float]
    ) -> int:
        """Dynasty value of the player sitting at the replacement rank.

        Returns 0 for positions without a depth chart or with no players.
        """
        group = self.position_groups.get(position)
        if not group:
            return 0
        replacement_rank = int(
            replacement_levels.get(position.lower()) or DEFAULT_REPLACEMENT_RANK
        )
        return group[min(replacement_rank, len(group) - 1)].dynasty_value
