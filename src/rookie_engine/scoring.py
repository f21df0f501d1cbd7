"""Rookie scoring: validation, trait/measurable scores and the overall grade.

Overall score::

    overall = w_trait * trait_score + w_measurables * measurables_score

with position-fixed weights from ``POSITION_WEIGHTS``. Trait grades (0-10)
are averaged and scaled to 0-100; measurables are normalized within the
rookie's position and averaged over the ones that are present.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from src.rookie_engine.config import (
    MEASURABLES,
    NEUTRAL_SCORE,
    POSITION_WEIGHTS,
    REQUIRED_FIELDS,
    TRAIT_FIELDS,
    TRAIT_MAX,
    TRAIT_MIN,
    VALID_POSITIONS,
)
from src.rookie_engine.models import Rookie, ScoredRookie
from src.rookie_engine.normalizer import (
    RangesByPosition,
    compute_measurable_ranges,
    normalize_value,
)
from src.rounding import round_half_up

logger = logging.getLogger(__name__)

# Breakdown key for each measurable attribute
_BREAKDOWN_KEYS = {
    "height_in": "height",
    "weight_lb": "weight",
    "forty": "forty",
    "breakout_age": "breakoutAge",
}


class RookieValidationError(Exception):
    """Raised when a rookie record violates the dataset contract."""


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------


def validate_rookie(record: Mapping) -> None:
    """Check a raw rookie record, raising on the first violation.

    Raises:
        RookieValidationError: missing required field, position outside
            QB/RB/WR/TE, or a trait grade outside [0, 10].
    """
    label = record.get("name") or record.get("id")

    for field_name in REQUIRED_FIELDS:
        if record.get(field_name) is None:
            raise RookieValidationError(
                f'Missing required field "{field_name}" for rookie: {label}'
            )

    if record["position"] not in VALID_POSITIONS:
        raise RookieValidationError(
            f'Invalid position "{record["position"]}" for rookie: {label}. '
            f"Must be one of: {', '.join(VALID_POSITIONS)}"
        )

    for trait in TRAIT_FIELDS:
        grade = record[trait]
        try:
            in_range = TRAIT_MIN <= float(grade) <= TRAIT_MAX
        except (TypeError, ValueError):
            in_range = False
        if not in_range:
            raise RookieValidationError(
                f'Trait "{trait}" must be {TRAIT_MIN}-{TRAIT_MAX} for rookie: '
                f"{label}. Got: {grade}"
            )


def validate_dataset(records: Iterable[Mapping]) -> None:
    """Validate every record; the first invalid one aborts the whole dataset."""
    count = 0
    for record in records:
        validate_rookie(record)
        count += 1
    logger.debug("Validated %d rookie records", count)


# ------------------------------------------------------------------
# Scores
# ------------------------------------------------------------------


def compute_trait_score(rookie: Rookie) -> float:
    grades = list(rookie.traits.values())
    return sum(grades) / len(grades) * 10


def compute_measurables_score(
    rookie: Rookie, ranges: RangesByPosition
) -> Tuple[float, Dict[str, Optional[int]]]:
    """Average of the position-normalized measurables the rookie has.

    Returns:
        ``(score, breakdown)`` where *breakdown* holds each measurable's
        rounded score or ``None`` if missing. *score* is 50 when the rookie
        has no measurables at all.
    """
    pos_ranges = ranges.get(rookie.position, {})
    scores = []
    breakdown: Dict[str, Optional[int]] = {}

    for attr, lower_is_better in MEASURABLES.items():
        key = _BREAKDOWN_KEYS[attr]
        value = getattr(rookie, attr)
        if value is None:
            breakdown[key] = None
            continue
        rng = pos_ranges.get(attr)
        score = normalize_value(
            value,
            rng.min if rng else None,
            rng.max if rng else None,
            lower_is_better,
        )
        scores.append(score)
        breakdown[key] = round_half_up(score)

    if not scores:
        return NEUTRAL_SCORE, breakdown
    return sum(scores) / len(scores), breakdown


def compute_rookie_score(rookie: Rookie, ranges: RangesByPosition) -> ScoredRookie:
    """Score one rookie against precomputed position ranges."""
    trait_score = compute_trait_score(rookie)
    measurables_score, measurables_breakdown = compute_measurables_score(rookie, ranges)

    weights = POSITION_WEIGHTS[rookie.position]
    overall = weights["trait"] * trait_score + weights["measurables"] * measurables_score

    breakdown: Dict[str, Optional[float]] = {
        trait: grade * 10 for trait, grade in rookie.traits.items()
    }
    breakdown.update(measurables_breakdown)

    return ScoredRookie(
        rookie=rookie,
        overall=round_half_up(overall, 1),
        trait_score=round_half_up(trait_score, 1),
        measurables_score=round_half_up(measurables_score, 1),
        breakdown=breakdown,
    )


def process_rookie_dataset(records: Iterable[Mapping]) -> List[ScoredRookie]:
    """Validate, normalize and score a whole rookie dataset.

    Args:
        records: Raw rookie records (camelCase keys, as loaded from the
            dataset).

    Returns:
        Scored rookies sorted by ``overall`` descending; ties keep input
        order.

    Raises:
        RookieValidationError: if any record is invalid. No scores are
            returned in that case.
    """
    records = list(records)
    validate_dataset(records)

    rookies = [Rookie.from_dict(r) for r in records]
    ranges = compute_measurable_ranges(rookies)

    scored = [compute_rookie_score(r, ranges) for r in rookies]
    scored.sort(key=lambda s: s.overall, reverse=True)

    logger.info("Scored %d rookies", len(scored))
    return scored
