from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

SETTINGS_DIR = PROJECT_ROOT / "data" / "settings"
SETTINGS_FILENAME = "league_settings.json"

VALID_SCORING = ("standard", "half-ppr", "ppr")
VALID_FORMATS = ("dynasty", "keeper", "redraft")
VALID_QB_FORMATS = ("1qb", "superflex", "2qb")
VALID_STRATEGIES = ("contender", "neutral", "rebuilder")
RANKING_SOURCES = ("DLF", "UTH", "DynastyNerds", "FantasyPros")
VALID_RANKING_SOURCES = ("consensus",) + RANKING_SOURCES

# Default league settings (persisted as a flat camelCase JSON object)
DEFAULT_SETTINGS = {
    "scoring": "half-ppr",
    "format": "dynasty",
    "qbFormat": "1qb",
    "tePremium": False,
    "idp": False,  # not priced into values yet
    "leagueSize": 12,
    "starters": {
        "qb": 1,
        "rb": 2,
        "wr": 3,
        "te": 1,
        "flex": 1,
        "superflex": 0,
    },
    "rankingSource": "consensus",
    "rankingBlend": None,  # {"source1": "DLF", "source2": "UTH", "weight": 0.5}
    "teamContext": {
        "teamAStrategy": "neutral",
        "teamBStrategy": "neutral",
        "riskTolerance": 0.5,
    },
    # 0 = no need, 1 = desperate
    "teamANeeds": {"qb": 0, "rb": 0, "wr": 0, "te": 0},
    "teamBNeeds": {"qb": 0, "rb": 0, "wr": 0, "te": 0},
}

# Reception boost by scoring format
SCORING_MULTIPLIERS = {
    "ppr": {"rb": 1.15, "wr": 1.10, "te": 1.08},
    "half-ppr": {"rb": 1.10, "wr": 1.05, "te": 1.04},
    "standard": {"rb": 1.0, "wr": 1.0, "te": 1.0},
}

QB_FORMAT_MULTIPLIERS = {
    "superflex": 1.8,
    "2qb": 2.0,
    "1qb": 0.85,
}

TE_PREMIUM_MULTIPLIER = 1.25

# Pick discount and age weighting by league format
PICK_MULTIPLIERS = {"dynasty": 1.0, "keeper": 0.7, "redraft": 0.3}
AGE_WEIGHTS = {"dynasty": 1.0, "keeper": 0.6, "redraft": 0.0}

# Share of each FLEX slot attributed to a position
FLEX_SHARES = {"rb": 0.4, "wr": 0.4, "te": 0.2}
REPLACEMENT_BUFFER = 0.25
