"""Settings persistence - save and load league settings to/from JSON files."""

import json
import logging
from pathlib import Path
from typing import Optional

from src.league_settings.config import SETTINGS_DIR, SETTINGS_FILENAME
from src.league_settings.settings import LeagueSettings

logger = logging.getLogger(__name__)


class SettingsPersistence:
    """Handles saving and loading league settings as a flat JSON object."""

    def __init__(self, storage_dir: Optional[Path] = None):
        self.storage_dir = storage_dir or SETTINGS_DIR
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        self.filepath = self.storage_dir / SETTINGS_FILENAME

    def save_settings(self, settings: LeagueSettings) -> Path:
        """Write *settings* to disk.

        Returns:
            Path to the saved file.
        """
        with open(self.filepath, "w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, indent=2)

        logger.info("Saved league settings to %s", self.filepath)
        return self.filepath

    def load_settings(self) -> LeagueSettings:
        """Load saved settings merged over the current defaults.

        A missing or corrupt file yields default settings.
        """
        if not self.filepath.exists():
            logger.info("No saved settings at %s, using defaults", self.filepath)
            return LeagueSettings()

        try:
            with open(self.filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("Corrupt settings file %s: %s", self.filepath, e)
            return LeagueSettings()

        if not isinstance(data, dict):
            logger.warning(
                "Settings file %s does not hold an object, using defaults",
                self.filepath,
            )
            return LeagueSettings()

        logger.info("Loaded league settings from %s", self.filepath)
        return LeagueSettings.from_dict(data)

    def reset_settings(self) -> LeagueSettings:
        """Overwrite the saved settings with defaults and return them."""
        settings = LeagueSettings()
        self.save_settings(settings)
        return settings
