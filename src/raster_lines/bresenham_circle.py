"""
Bresenham's Circle Algorithm

Midpoint circle walker that works through one ring offset at a time and
emits it reflected into four quadrants: each call to ``next()`` returns the
point for the current quadrant, and the decision variable is only updated
after the fourth quadrant has been emitted.

Points lying on the axes can be emitted more than once per ring; they are
kept so the point count stays exactly four per ring.

Example:
    >>> list(BresenhamCircle(0, 0, 1))
    [(1, 0), (0, 1), (-1, 0), (0, -1)]
"""

from typing import List

from .numeric import Point
from .steps import Traversal


class BresenhamCircle(Traversal):
    """Iterator over the pixels of an integer circle outline."""

    def __init__(self, center_x: int, center_y: int, radius: int):
        """
        Initialize the walk.

        Args:
            center_x, center_y: Circle center
            radius: Circle radius; 0 produces no points
        """
        self.center_x = center_x
        self.center_y = center_y
        self.radius = radius

        self._x = -radius
        self._y = 0
        self._error = 2 - 2 * radius
        self._quadrant = 1

    def __next__(self) -> Point[int]:
        if self._x >= 0:
            raise StopIteration

        x, y = self._x, self._y
        cx, cy = self.center_x, self.center_y

        if self._quadrant == 1:
            point = (cx - x, cy + y)
        elif self._quadrant == 2:
            point = (cx - y, cy - x)
        elif self._quadrant == 3:
            point = (cx + x, cy - y)
        else:
            point = (cx + y, cy + x)

            # Advance the ring once all four quadrants are out
            threshold = self._error
            if threshold <= self._y:
                self._y += 1
                self._error += self._y * 2 + 1

            if threshold > self._x or self._error > self._y:
                self._x += 1
                self._error += self._x * 2 + 1

        self._quadrant = self._quadrant % 4 + 1
        return point


def bresenham_circle(center_x: int, center_y: int, radius: int) -> List[Point[int]]:
    """Collect a circle outline into a list."""
    return BresenhamCircle(center_x, center_y, radius).collect()
