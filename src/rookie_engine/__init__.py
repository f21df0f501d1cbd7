from src.rookie_engine.models import MeasurableRange, Rookie, ScoredRookie
from src.rookie_engine.normalizer import compute_measurable_ranges, normalize_value
from src.rookie_engine.ranking import assign_ranks, filter_rookies, get_years
from src.rookie_engine.scoring import (
    RookieValidationError,
    compute_rookie_score,
    process_rookie_dataset,
    validate_dataset,
    validate_rookie,
)

__all__ = [
    "MeasurableRange",
    "Rookie",
    "RookieValidationError",
    "ScoredRookie",
    "assign_ranks",
    "compute_measurable_ranges",
    "compute_rookie_score",
    "filter_rookies",
    "get_years",
    "normalize_value",
    "process_rookie_dataset",
    "validate_dataset",
    "validate_rookie",
]
