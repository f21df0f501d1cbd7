"""Shared fixtures for the value engine test suite."""

import json

import pytest

from src.data_pipeline.cleaning import DatasetCleaner
from src.league_settings.settings import LeagueSettings
from src.value_engine.models import Player
from src.value_engine.player_pool import PlayerPool
from src.value_engine.trade_analyzer import TradeAnalyzer
from src.value_engine.value_calculator import PlayerValueEngine

CURRENT_YEAR = 2026


def _make_player(pid, position, value, age):
    return Player(
        id=pid,
        name=f"Player {pid}",
        team="TST",
        position=position,
        age=age,
        dynasty_value=value,
        contract_years=2,
        rankings={"DLF": 10, "UTH": 10, "DynastyNerds": 10, "FantasyPros": 10},
    )


def _make_pool_players():
    """50 WRs (10000 down to 5100), 30 RBs, 20 QBs, 15 TEs, a K and a DEF.

    Ids encode position and depth: 1000+i WR, 2000+i RB, 3000+i QB,
    4000+i TE, where i is the 0-based rank.
    """
    players = []
    for i in range(50):
        players.append(_make_player(1000 + i, "WR", 10000 - i * 100, 25))
    for i in range(30):
        players.append(_make_player(2000 + i, "RB", 9500 - i * 150, 24))
    for i in range(20):
        players.append(_make_player(3000 + i, "QB", 8000 - i * 200, 30))
    for i in range(15):
        players.append(_make_player(4000 + i, "TE", 7000 - i * 250, 27))
    players.append(_make_player(5000, "K", 500, 30))
    players.append(_make_player(6000, "DEF", 400, None))
    return players


# ------------------------------------------------------------------
# Engine fixtures – pure computation, reused across a module
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def pool():
    return PlayerPool(_make_pool_players())


@pytest.fixture(scope="module")
def engine(pool):
    return PlayerValueEngine(pool, current_year=CURRENT_YEAR)


@pytest.fixture(scope="module")
def analyzer(engine):
    return TradeAnalyzer(engine)


@pytest.fixture
def settings():
    return LeagueSettings()


# ------------------------------------------------------------------
# Dataset fixtures
# ------------------------------------------------------------------

_PLAYER_RECORDS = [
    {
        "id": 1, "name": "Ja\u2019Marr Chase", "team": "Cincinnati Bengals",
        "position": "WR", "age": 25, "dynastyValue": 9800,
        "contract": {"years": 3},
        "rankings": {"DLF": 1, "UTH": 2, "DynastyNerds": 1, "FantasyPros": 1},
    },
    {
        "id": 2, "name": "Bijan Robinson", "team": "ATL",
        "position": "rb", "age": 23, "dynastyValue": 9500,
        "contract": {"years": 2},
        "rankings": {"DLF": 2, "UTH": 1, "DynastyNerds": 3, "FantasyPros": 2},
    },
    {
        "id": 3, "name": "Josh Allen", "team": "BUF",
        "position": "QB", "age": 29, "dynastyValue": 8000,
        "contract": {"years": 4},
        "rankings": {"DLF": 5, "UTH": 9, "DynastyNerds": 4, "FantasyPros": 6},
    },
    {
        "id": 4, "name": "Brock  Bowers", "team": "LV",
        "position": "TE", "age": 22, "dynastyValue": 7000,
        "contract": {"years": 4},
        "rankings": {"DLF": 8, "UTH": 7, "DynastyNerds": 10, "FantasyPros": 9},
    },
    {
        "id": 5, "name": "2027 Pick 1.01", "team": "",
        "position": "PICK", "age": 0, "dynastyValue": 6000,
        "contract": {"years": None},
        "rankings": {},
    },
    {
        "id": 6, "name": "Tyler Linebacker", "team": "DAL",
        "position": "LB", "age": 26, "dynastyValue": 1000,
        "contract": {"years": 2},
        "rankings": {"DLF": 90, "UTH": 90, "DynastyNerds": 90, "FantasyPros": 90},
    },
]

_ROOKIE_CSV = """\
id,name,year,position,school,heightIn,weightLb,forty,breakoutAge,iq,routeRunning,vision,ballSkills
101,Fast Receiver,2025,WR,Ohio State,76,220,4.3,19,8,8,8,8
102,Slow Receiver,2025,WR,LSU,70,180,4.6,21,9,9,9,9
103,Plain Back,2026,rb,Alabama,,,,,7,7,7,7
"""


@pytest.fixture
def cleaner():
    return DatasetCleaner()


@pytest.fixture
def raw_data_dir(tmp_path):
    """A data directory with players.json and rookies.csv."""
    data_dir = tmp_path / "raw"
    data_dir.mkdir()
    with open(data_dir / "players.json", "w", encoding="utf-8") as f:
        json.dump({"players": _PLAYER_RECORDS}, f)
    (data_dir / "rookies.csv").write_text(_ROOKIE_CSV, encoding="utf-8")
    return data_dir
