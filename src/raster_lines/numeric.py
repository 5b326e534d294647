"""
Numeric Helpers Shared by the Rasterizers

Integer algorithms run on Python ``int`` (arbitrary precision, no overflow)
and floating algorithms on Python ``float`` (IEEE-754 double). Coordinates
are plain tuples so results compare, hash and print naturally.
"""

import math
from typing import Tuple, TypeVar, Union

T = TypeVar("T", int, float)

Number = Union[int, float]
Point = Tuple[T, T]
Voxel = Tuple[T, T, T]


def signum(value: Number) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halfway cases away from zero.

    Python's built-in ``round`` rounds halves to even, which would make
    ``2.5`` and ``3.5`` snap in different directions.

    Args:
        value: Finite real number

    Returns:
        Nearest integer (``0.5 -> 1``, ``-0.5 -> -1``, ``2.5 -> 3``)
    """
    whole = math.trunc(value)
    # Exact for doubles: the fractional part is always representable
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return whole


def fpart(value: float) -> float:
    """Fractional part measured from the floor (always in [0, 1))."""
    return value - math.floor(value)
