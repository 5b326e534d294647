"""
Midpoint Line Algorithm

Floating-point input, integer output. Structurally the same walk as
``Bresenham``, but the decision variable ``k`` is the implicit line
equation ``a*x + b*y + c`` evaluated at the next midpoint, with

    a = -(end.y - start.y)
    b = end.x - start.x
    c = start.x * end.y - end.x * start.y

computed from the unrounded endpoints in octant space. The endpoints are
snapped to the grid once, at construction, with round-half-away-from-zero.

Reference: http://www.mat.univie.ac.at/~kriegl/Skripten/CG/node25.html

Example:
    >>> list(Midpoint((0.2, 0.02), (2.8, 7.7)))
    [(0, 0), (1, 1), (1, 2), (1, 3), (2, 4), (2, 5), (2, 6), (3, 7), (3, 8)]
"""

from typing import List

from .numeric import Point, round_half_away
from .octant import Octant
from .steps import Traversal


class Midpoint(Traversal):
    """Iterator over the pixels of a midpoint line between real points."""

    def __init__(self, start: Point[float], end: Point[float]):
        """
        Initialize the walk.

        Args:
            start: Real start point, snapped to the nearest pixel
            end: Real end point, snapped to the nearest pixel
        """
        start = (float(start[0]), float(start[1]))
        end = (float(end[0]), float(end[1]))

        self.octant = Octant.from_points(start, end)
        start = self.octant.to_octant(start)
        end = self.octant.to_octant(end)

        self._a = -(end[1] - start[1])
        self._b = end[0] - start[0]
        c = start[0] * end[1] - end[0] * start[1]

        self._x = round_half_away(start[0])
        self._y = round_half_away(start[1])
        self._end_x = round_half_away(end[0])
        self._k = self._a * (self._x + 1.0) + self._b * (self._y + 0.5) + c

    def __next__(self) -> Point[int]:
        if self._x > self._end_x:
            raise StopIteration

        point = self.octant.from_octant((self._x, self._y))

        # N step
        if self._k <= 0:
            self._k += self._b
            self._y += 1

        # E step
        self._k += self._a
        self._x += 1

        return point


def midpoint(start: Point[float], end: Point[float]) -> List[Point[int]]:
    """Collect a midpoint line into a list."""
    return Midpoint(start, end).collect()
