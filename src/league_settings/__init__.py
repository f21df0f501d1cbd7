from src.league_settings.persistence import SettingsPersistence
from src.league_settings.settings import (
    LeagueSettings,
    Multipliers,
    TeamContext,
    derive_multipliers,
    derive_replacement_levels,
    migrate_settings,
)

__all__ = [
    "LeagueSettings",
    "Multipliers",
    "SettingsPersistence",
    "TeamContext",
    "derive_multipliers",
    "derive_replacement_levels",
    "migrate_settings",
]
