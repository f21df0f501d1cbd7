from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
RAW_DATA_DIR = DATA_DIR / "raw"
PROCESSED_DATA_DIR = DATA_DIR / "processed"

# Dataset file stems; .json is preferred over .csv when both exist
PLAYERS_STEM = "players"
ROOKIES_STEM = "rookies"
SUPPORTED_SUFFIXES = (".json", ".csv")

OUTPUT_FILENAME = "values_latest.json"

# Columns every players file must provide
PLAYER_REQUIRED_COLUMNS = ["id", "name", "position", "dynastyValue"]

# Nested JSON fields flattened by pandas -> flat column names
PLAYER_COLUMN_RENAMES = {
    "contract.years": "contractYears",
    "rankings.DLF": "DLF",
    "rankings.UTH": "UTH",
    "rankings.DynastyNerds": "DynastyNerds",
    "rankings.FantasyPros": "FantasyPros",
}

ROOKIE_REQUIRED_COLUMNS = ["id", "name", "year", "position"]
ROOKIE_MEASURABLE_COLUMNS = ["heightIn", "weightLb", "forty", "breakoutAge"]
ROOKIE_TRAIT_COLUMNS = ["iq", "routeRunning", "vision", "ballSkills"]
