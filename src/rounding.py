"""Rounding helpers shared by the scoring engines."""

import math


def round_half_up(value: float, digits: int = 0):
    """Round halves away from negative infinity (``2.5 -> 3``, ``-2.5 -> -2``).

    Python's built-in ``round`` rounds halves to even, which would shift
    published values by one point on exact halves.
    """
    if digits == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
