"""
Bresenham's Line Algorithm (2D)

Integer incremental-error line walker. The line is first normalized into
octant 0 so the loop only ever steps +x, and +y when the error term allows.

The output includes both endpoints and is NOT symmetric: walking from
``end`` to ``start`` can choose different pixels than the reverse of walking
from ``start`` to ``end``.

Example:
    >>> list(Bresenham((0, 0), (5, 6)))
    [(0, 0), (0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6)]
"""

from typing import List

from .numeric import Point
from .octant import Octant
from .steps import Traversal


class Bresenham(Traversal):
    """Iterator over the pixels of an integer Bresenham line."""

    def __init__(self, start: Point[int], end: Point[int]):
        """
        Initialize the walk.

        Args:
            start: First pixel (always emitted)
            end: Last pixel (always emitted)
        """
        self.octant = Octant.from_points(start, end)
        start = self.octant.to_octant(start)
        end = self.octant.to_octant(end)

        self._delta_x = end[0] - start[0]
        self._delta_y = end[1] - start[1]
        self._x, self._y = start
        self._end_x = end[0]
        self._error = self._delta_y - self._delta_x

    def __next__(self) -> Point[int]:
        if self._x > self._end_x:
            raise StopIteration

        point = self.octant.from_octant((self._x, self._y))

        if self._error >= 0:
            self._y += 1
            self._error -= self._delta_x

        self._x += 1
        self._error += self._delta_y

        return point


def bresenham(start: Point[int], end: Point[int]) -> List[Point[int]]:
    """Collect a Bresenham line into a list."""
    return Bresenham(start, end).collect()
