"""
Bresenham's Ellipse Algorithm

Two-region decision-variable walker for axis-aligned ellipses.

Region 1 covers the part of the quarter arc where the tangent slope is
greater than -1 (y always advances, x sometimes retreats); region 2 covers
the steep part where the slope is less than -1 (x always advances, y
sometimes retreats). The switch happens exactly once, when the crossover
term ``end_x`` drops below ``end_y``, and region 2's state is set up in
closed form rather than by restarting.

Region 1 never walks past ``y = radius_y`` and region 2 never past
``x = radius_x``, so an ellipse with a zero semi-axis still terminates.

Like ``BresenhamCircle`` every computed offset is emitted into four
quadrants in turn, and coincident points on the axes are not removed.

Reference: https://dai.fmph.uniba.sk/upload/0/01/Ellipse.pdf

Example:
    >>> list(BresenhamEllipse(5, 5, 2, 3))[:8]
    [(7, 5), (3, 5), (3, 5), (7, 5), (7, 6), (3, 6), (3, 4), (7, 4)]
"""

from typing import List

from .numeric import Point
from .steps import Traversal


class BresenhamEllipse(Traversal):
    """Iterator over the pixels of an integer ellipse outline."""

    def __init__(self, center_x: int, center_y: int, radius_x: int, radius_y: int):
        """
        Initialize the walk in region 1.

        Args:
            center_x, center_y: Ellipse center
            radius_x: Semi-axis along x
            radius_y: Semi-axis along y
        """
        self.center_x = center_x
        self.center_y = center_y
        self.radius_x = radius_x
        self.radius_y = radius_y

        self._radius_x_squared_doubled = 2 * radius_x * radius_x
        self._radius_y_squared_doubled = 2 * radius_y * radius_y

        self._x = radius_x
        self._y = 0
        self._delta_x = radius_y * radius_y * (1 - 2 * radius_x)
        self._delta_y = radius_x * radius_x
        self._error = 0
        self._end_x = self._radius_y_squared_doubled * radius_x
        self._end_y = 0
        self._quadrant = 1
        self._first_region = True

    def _enter_second_region(self):
        """Re-initialize the decision state at the top of the arc."""
        self._first_region = False

        self._x = 0
        self._y = self.radius_y
        self._delta_x = self.radius_y * self.radius_y
        self._delta_y = self.radius_x * self.radius_x * (1 - 2 * self.radius_y)
        self._error = 0
        self._end_x = 0
        self._end_y = self._radius_x_squared_doubled * self.radius_y

    def _quadrant_point(self) -> Point[int]:
        if self._quadrant == 1:
            return (self.center_x + self._x, self.center_y + self._y)
        elif self._quadrant == 2:
            return (self.center_x - self._x, self.center_y + self._y)
        elif self._quadrant == 3:
            return (self.center_x - self._x, self.center_y - self._y)
        return (self.center_x + self._x, self.center_y - self._y)

    def __next__(self) -> Point[int]:
        if (self._first_region and self._end_x >= self._end_y
                and self._y <= self.radius_y):
            point = self._quadrant_point()

            if self._quadrant == 4:
                self._y += 1
                self._end_y += self._radius_x_squared_doubled
                self._error += self._delta_y
                self._delta_y += self._radius_x_squared_doubled

                if self._error * 2 + self._delta_x > 0:
                    self._x -= 1
                    self._end_x -= self._radius_y_squared_doubled
                    self._error += self._delta_x
                    self._delta_x += self._radius_y_squared_doubled

        elif self._end_x <= self._end_y and self._x <= self.radius_x:
            if self._first_region:
                self._enter_second_region()

            point = self._quadrant_point()

            if self._quadrant == 4:
                self._x += 1
                self._end_x += self._radius_y_squared_doubled
                self._error += self._delta_x
                self._delta_x += self._radius_y_squared_doubled

                if self._error * 2 + self._delta_y > 0:
                    self._y -= 1
                    self._end_y -= self._radius_x_squared_doubled
                    self._error += self._delta_y
                    self._delta_y += self._radius_x_squared_doubled

        else:
            raise StopIteration

        self._quadrant = self._quadrant % 4 + 1
        return point


def bresenham_ellipse(
    center_x: int,
    center_y: int,
    radius_x: int,
    radius_y: int
) -> List[Point[int]]:
    """Collect an ellipse outline into a list."""
    return BresenhamEllipse(center_x, center_y, radius_x, radius_y).collect()
