from src.value_engine.formatting import format_value
from src.value_engine.models import (
    PickDetails,
    Player,
    TradeAnalysis,
    ValueBreakdown,
    ValueTrend,
)
from src.value_engine.player_pool import PlayerPool
from src.value_engine.trade_analyzer import TradeAnalyzer
from src.value_engine.value_calculator import PlayerValueEngine

__all__ = [
    "PickDetails",
    "Player",
    "PlayerPool",
    "PlayerValueEngine",
    "TradeAnalysis",
    "TradeAnalyzer",
    "ValueBreakdown",
    "ValueTrend",
    "format_value",
]
