"""Position-relative normalization of rookie measurables.

Ranges are computed per position across every draft class in the dataset,
so prospects from different years are scored on the same scale. Ranges are
plain return values; callers recompute them whenever the dataset changes.
"""

import logging
from typing import Dict, Iterable, Optional

from src.rookie_engine.config import MEASURABLES, NEUTRAL_SCORE, VALID_POSITIONS
from src.rookie_engine.models import MeasurableRange, Rookie

logger = logging.getLogger(__name__)

RangesByPosition = Dict[str, Dict[str, MeasurableRange]]


def compute_measurable_ranges(rookies: Iterable[Rookie]) -> RangesByPosition:
    """Compute min/max of each measurable per position.

    Only non-null values contribute. A position with no rookies, or a
    measurable nobody at that position has, gets an empty range.
    """
    bounds: Dict[str, Dict[str, list]] = {
        pos: {attr: [] for attr in MEASURABLES} for pos in VALID_POSITIONS
    }

    for rookie in rookies:
        if rookie.position not in bounds:
            continue
        for attr in MEASURABLES:
            value = getattr(rookie, attr)
            if value is not None:
                bounds[rookie.position][attr].append(value)

    ranges: RangesByPosition = {}
    for pos, by_attr in bounds.items():
        ranges[pos] = {
            attr: MeasurableRange(min(values), max(values)) if values else MeasurableRange()
            for attr, values in by_attr.items()
        }
        logger.debug(
            "Measurable ranges %s: %s",
            pos,
            ", ".join(f"{a}=[{r.min}, {r.max}]" for a, r in ranges[pos].items()),
        )

    return ranges


def normalize_value(
    value: float,
    min_value: Optional[float],
    max_value: Optional[float],
    lower_is_better: bool = False,
) -> float:
    """Scale *value* linearly into [0, 100] within ``[min_value, max_value]``.

    Returns 50 when the range carries no signal (empty or ``min == max``).
    For lower-is-better measurables the result is inverted so a higher score
    is always more favorable.
    """
    if min_value is None or max_value is None or min_value == max_value:
        return NEUTRAL_SCORE

    normalized = (value - min_value) / (max_value - min_value) * 100
    if lower_is_better:
        normalized = 100 - normalized

    return max(0.0, min(100.0, normalized))
