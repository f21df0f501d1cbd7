"""Data cleaning for the player and rookie datasets.

Handles standardization before records reach the engines:
- Canonical position tags (DST -> DEF, PK -> K, upper case)
- Player name normalization (quotes, dashes, whitespace)
- Team abbreviations (full names -> abbreviations)
- NaN -> None for optional fields
"""

import logging
import math
from typing import Dict, List, Optional

import pandas as pd

from src.data_pipeline.config import (
    ROOKIE_MEASURABLE_COLUMNS,
    ROOKIE_TRAIT_COLUMNS,
)
from src.league_settings.config import RANKING_SOURCES
from src.value_engine.config import VALUED_POSITIONS

logger = logging.getLogger(__name__)

# Full team name -> standard abbreviation
TEAM_NAME_TO_ABBR = {
    "Arizona Cardinals": "ARI",
    "Atlanta Falcons": "ATL",
    "Baltimore Ravens": "BAL",
    "Buffalo Bills": "BUF",
    "Carolina Panthers": "CAR",
    "Chicago Bears": "CHI",
    "Cincinnati Bengals": "CIN",
    "Cleveland Browns": "CLE",
    "Dallas Cowboys": "DAL",
    "Denver Broncos": "DEN",
    "Detroit Lions": "DET",
    "Green Bay Packers": "GB",
    "Houston Texans": "HOU",
    "Indianapolis Colts": "IND",
    "Jacksonville Jaguars": "JAC",
    "Kansas City Chiefs": "KC",
    "Las Vegas Raiders": "LV",
    "Los Angeles Chargers": "LAC",
    "Los Angeles Rams": "LAR",
    "Miami Dolphins": "MIA",
    "Minnesota Vikings": "MIN",
    "New England Patriots": "NE",
    "New Orleans Saints": "NO",
    "New York Giants": "NYG",
    "New York Jets": "NYJ",
    "Philadelphia Eagles": "PHI",
    "Pittsburgh Steelers": "PIT",
    "San Francisco 49ers": "SF",
    "Seattle Seahawks": "SEA",
    "Tampa Bay Buccaneers": "TB",
    "Tennessee Titans": "TEN",
    "Washington Commanders": "WAS",
}

# Aliases that map to canonical position names
_POSITION_ALIASES = {
    "PK": "K",
    "DST": "DEF",
    "D/ST": "DEF",
}


def _is_missing(value) -> bool:
    if value is None or value is pd.NA:
        return True
    return isinstance(value, float) and math.isnan(value)


def _safe(value, default=None):
    """Return *default* when *value* is NaN/None/pd.NA, else the value."""
    return default if _is_missing(value) else value


def _safe_int(value, default=None) -> Optional[int]:
    value = _safe(value)
    if value is None:
        return default
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


class DatasetCleaner:
    """Cleans raw dataset frames into engine-ready records."""

    # ------------------------------------------------------------------
    # Field helpers
    # ------------------------------------------------------------------
    @staticmethod
    def standardize_position(pos: str) -> Optional[str]:
        """Map a raw position tag to a canonical one, or None if unknown.

        Examples:
            "wr"  -> "WR"
            "DST" -> "DEF"
            "PK"  -> "K"
            "LB"  -> None
        """
        if _is_missing(pos):
            return None
        tag = str(pos).strip().upper()
        tag = _POSITION_ALIASES.get(tag, tag)
        return tag if tag in VALUED_POSITIONS else None

    @staticmethod
    def standardize_team_name(team: str) -> Optional[str]:
        """Full names ("Philadelphia Eagles") -> "PHI"; abbreviations pass through."""
        if _is_missing(team):
            return None
        team = str(team).strip().strip('"')
        if team == "":
            return None
        return TEAM_NAME_TO_ABBR.get(team, team)

    @staticmethod
    def normalize_player_name(name: str) -> Optional[str]:
        """Normalize a name: ASCII apostrophes and hyphens, collapsed whitespace."""
        if _is_missing(name):
            return None

        name = str(name).strip().strip('"')
        if name == "":
            return None

        name = name.replace("\u2019", "'")   # right single curly '
        name = name.replace("\u2018", "'")   # left single curly '
        name = name.replace("\u02BC", "'")   # modifier letter apostrophe
        name = name.replace("\u2013", "-")   # en dash
        name = name.replace("\u2014", "-")   # em dash

        return " ".join(name.split())

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------
    def clean_players(self, df: pd.DataFrame) -> pd.DataFrame:
        """Standardize the players frame.

        Rows with an unrecognized position are dropped with a warning and
        negative dynasty values are clipped to 0.
        """
        out = df.copy()
        out["position"] = out["position"].apply(self.standardize_position)
        out["name"] = out["name"].apply(self.normalize_player_name)
        if "team" in out.columns:
            out["team"] = out["team"].apply(self.standardize_team_name)

        bad_pos = out["position"].isna()
        if bad_pos.any():
            logger.warning(
                "Dropping %d players with no recognized position: %s",
                bad_pos.sum(),
                df.loc[bad_pos, "name"].tolist(),
            )
            out = out[~bad_pos].reset_index(drop=True)

        values = pd.to_numeric(out["dynastyValue"], errors="coerce").fillna(0)
        negative = values < 0
        if negative.any():
            logger.warning("Clipping %d negative dynasty values to 0", negative.sum())
        out["dynastyValue"] = values.clip(lower=0).astype(int)

        logger.info("Cleaned players: %d rows", len(out))
        return out

    @staticmethod
    def to_player_records(df: pd.DataFrame) -> List[Dict]:
        """Convert a cleaned players frame to dataset records (camelCase)."""
        records = []
        for row in df.to_dict(orient="records"):
            rankings = {
                source: _safe_int(row.get(source))
                for source in RANKING_SOURCES
                if _safe_int(row.get(source)) is not None
            }
            records.append({
                "id": _safe_int(row["id"]),
                "name": row["name"],
                "team": _safe(row.get("team"), ""),
                "position": row["position"],
                "age": _safe_int(row.get("age"), 0),
                "dynastyValue": int(row["dynastyValue"]),
                "contract": {"years": _safe_int(row.get("contractYears"))},
                "rankings": rankings,
            })
        return records

    # ------------------------------------------------------------------
    # Rookies
    # ------------------------------------------------------------------
    def clean_rookies(self, df: pd.DataFrame) -> pd.DataFrame:
        """Standardize names and position tags.

        Invalid rookies are kept so the scoring engine's validation can
        reject the dataset as a whole.
        """
        out = df.copy()
        out["name"] = out["name"].apply(self.normalize_player_name)
        out["position"] = out["position"].apply(
            lambda p: None if _is_missing(p) else str(p).strip().upper()
        )
        for col in ROOKIE_MEASURABLE_COLUMNS:
            if col in out.columns:
                out[col] = pd.to_numeric(out[col], errors="coerce")
        # Unparseable grades are kept so validation can report them
        for col in ROOKIE_TRAIT_COLUMNS:
            if col in out.columns:
                numeric = pd.to_numeric(out[col], errors="coerce")
                out[col] = numeric.astype(object).where(numeric.notna(), out[col])
        logger.info("Cleaned rookies: %d rows", len(out))
        return out

    @staticmethod
    def to_rookie_records(df: pd.DataFrame) -> List[Dict]:
        """Convert a cleaned rookies frame to dataset records with None for NaN."""
        records = []
        for row in df.to_dict(orient="records"):
            record = {key: _safe(value) for key, value in row.items()}
            if record.get("year") is not None:
                record["year"] = _safe_int(record["year"])
            records.append(record)
        return records

    def clean_all(self, data: Dict[str, pd.DataFrame]) -> Dict[str, List[Dict]]:
        """Clean both frames from DatasetIngester.read_all() into records."""
        return {
            "players": self.to_player_records(self.clean_players(data["players"])),
            "rookies": self.to_rookie_records(self.clean_rookies(data["rookies"])),
        }
