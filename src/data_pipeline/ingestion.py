"""Dataset ingestion for the player and rookie catalogs.

Each dataset may be a JSON export (a list of records, or an object holding
the list under ``"players"`` / ``"rookies"``) or a flat CSV. Nested JSON
fields such as ``contract.years`` and ``rankings.DLF`` are flattened to the
CSV column names so both formats clean the same way.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd

from src.data_pipeline.config import (
    PLAYER_COLUMN_RENAMES,
    PLAYER_REQUIRED_COLUMNS,
    PLAYERS_STEM,
    ROOKIE_REQUIRED_COLUMNS,
    ROOKIES_STEM,
    SUPPORTED_SUFFIXES,
)

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when a dataset file cannot be read."""


class DatasetIngester:
    """Reads the player and rookie datasets from a data directory."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _resolve_path(self, stem: str) -> Path:
        """Find ``{stem}.json`` or ``{stem}.csv``, raising if neither exists."""
        for suffix in SUPPORTED_SUFFIXES:
            filepath = self.data_dir / f"{stem}{suffix}"
            if filepath.exists():
                return filepath
        raise FileNotFoundError(
            f"Expected {stem}.json or {stem}.csv in {self.data_dir}"
        )

    def _read(self, stem: str, list_key: str) -> pd.DataFrame:
        filepath = self._resolve_path(stem)
        logger.info("Reading %s: %s", stem, filepath.name)

        try:
            if filepath.suffix == ".csv":
                return pd.read_csv(filepath)

            with open(filepath, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (
            json.JSONDecodeError,
            pd.errors.ParserError,
            pd.errors.EmptyDataError,
            UnicodeDecodeError,
        ) as e:
            raise IngestionError(f"Could not parse {filepath}: {e}") from e

        if isinstance(payload, dict):
            payload = payload.get(list_key)
        if not isinstance(payload, list):
            raise IngestionError(
                f"{filepath} must hold a list of records or an object with {list_key!r}"
            )
        return pd.json_normalize(payload)

    @staticmethod
    def _check_columns(df: pd.DataFrame, required: List[str], name: str) -> None:
        missing = [c for c in required if c not in df.columns]
        if missing:
            raise IngestionError(f"{name} dataset is missing columns: {missing}")

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------
    def read_players(self) -> pd.DataFrame:
        """Read the player/pick catalog.

        Returns DataFrame with columns:
            id, name, team, position, age, dynastyValue, contractYears,
            DLF, UTH, DynastyNerds, FantasyPros (optional ones may be absent)
        """
        df = self._read(PLAYERS_STEM, "players")
        df = df.rename(columns=PLAYER_COLUMN_RENAMES)
        self._check_columns(df, PLAYER_REQUIRED_COLUMNS, "Players")
        logger.info("Loaded %d player rows", len(df))
        return df

    # ------------------------------------------------------------------
    # Rookies
    # ------------------------------------------------------------------
    def read_rookies(self) -> pd.DataFrame:
        """Read the rookie prospect catalog."""
        df = self._read(ROOKIES_STEM, "rookies")
        self._check_columns(df, ROOKIE_REQUIRED_COLUMNS, "Rookies")
        logger.info("Loaded %d rookie rows", len(df))
        return df

    def read_all(self) -> Dict[str, pd.DataFrame]:
        """Read both datasets. Keys: ``players``, ``rookies``."""
        return {
            "players": self.read_players(),
            "rookies": self.read_rookies(),
        }
