"""Rank assignment and filtering for scored rookies.

Sorting is stable: rookies with equal ``overall`` keep their relative input
order, which is the only tiebreaker.
"""

import dataclasses
from typing import Dict, List, Optional, Sequence, Union

from src.rookie_engine.config import RANK_MODES
from src.rookie_engine.models import ScoredRookie


def assign_ranks(rookies: Sequence[ScoredRookie], mode: str = "all") -> List[ScoredRookie]:
    """Return copies of *rookies* carrying a rank.

    Modes:
        ``"all"``  - one global ranking by ``overall`` descending.
        ``"year"`` - ranked within each draft class, classes in ascending
        year order, with a ``"{year} #{rank}"`` label.

    Raises:
        ValueError: for an unknown mode.
    """
    if mode not in RANK_MODES:
        raise ValueError(f"Invalid rank mode: {mode!r}. Must be one of {RANK_MODES}.")

    if mode == "all":
        ordered = sorted(rookies, key=lambda r: r.overall, reverse=True)
        return [dataclasses.replace(r, rank=i) for i, r in enumerate(ordered, start=1)]

    by_year: Dict[int, List[ScoredRookie]] = {}
    for rookie in rookies:
        by_year.setdefault(rookie.year, []).append(rookie)

    result: List[ScoredRookie] = []
    for year in sorted(by_year):
        ordered = sorted(by_year[year], key=lambda r: r.overall, reverse=True)
        for i, rookie in enumerate(ordered, start=1):
            result.append(dataclasses.replace(rookie, rank=i, rank_label=f"{year} #{i}"))
    return result


def get_years(rookies: Sequence[ScoredRookie]) -> List[int]:
    """Distinct draft years, most recent first."""
    return sorted({r.year for r in rookies}, reverse=True)


def filter_rookies(
    rookies: Sequence[ScoredRookie],
    year: Optional[Union[int, str]] = None,
    position: Optional[str] = None,
    search: Optional[str] = None,
) -> List[ScoredRookie]:
    """Filter by draft year, position and a name/school search string.

    ``None`` or ``"all"`` disables the year and position filters. *search*
    is a case-insensitive substring match against name or school.
    """
    filtered = list(rookies)

    if year is not None and year != "all":
        filtered = [r for r in filtered if r.year == int(year)]

    if position is not None and position != "all":
        filtered = [r for r in filtered if r.position == position]

    if search and search.strip():
        query = search.strip().lower()
        filtered = [
            r for r in filtered
            if query in r.name.lower() or (r.school and query in r.school.lower())
        ]

    return filtered
