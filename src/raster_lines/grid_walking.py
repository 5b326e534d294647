"""
Grid Walking: Orthogonal Steps and Supercover

Both walkers track how many of the ``nx = |dx|`` horizontal and
``ny = |dy|`` vertical unit steps have been taken and, at each point,
advance the axis whose next cell boundary the ideal line crosses first,
i.e. the smaller of ``(0.5 + ix) / nx`` and ``(0.5 + iy) / ny``.

The comparison is evaluated exactly on integers by cross-multiplying,
``(1 + 2 * ix) * ny`` against ``(1 + 2 * iy) * nx``. A zero-length axis
never takes part in the comparison: when ``nx == 0`` the walk only steps y,
and when ``ny == 0`` it only steps x.

Reference: http://www.redblobgames.com/grids/line-drawing.html
"""

from typing import List

from .numeric import Point, signum
from .steps import Traversal


class _GridWalk(Traversal):
    """Shared state for the orthogonal grid walkers."""

    def __init__(self, start: Point[int], end: Point[int]):
        """
        Initialize the walk.

        Args:
            start: First cell (always emitted)
            end: Last cell (always emitted)
        """
        dx = end[0] - start[0]
        dy = end[1] - start[1]

        self._x, self._y = start
        self._ix = 0
        self._iy = 0
        self._sign_x = signum(dx)
        self._sign_y = signum(dy)
        self._nx = abs(dx)
        self._ny = abs(dy)

    def _compare(self) -> int:
        """
        Which boundary the line crosses next.

        Returns:
            Negative for x first, positive for y first, 0 when the line
            passes exactly through the corner
        """
        if self._nx == 0:
            return 1
        if self._ny == 0:
            return -1
        return (1 + 2 * self._ix) * self._ny - (1 + 2 * self._iy) * self._nx

    def _step_x(self):
        self._x += self._sign_x
        self._ix += 1

    def _step_y(self):
        self._y += self._sign_y
        self._iy += 1

    def _exhausted(self) -> bool:
        return self._ix > self._nx or self._iy > self._ny


class WalkGrid(_GridWalk):
    """
    Walk along a grid taking only orthogonal steps.

    Exact corner crossings step y first, so the walk is not symmetric:
    swapping ``start`` and ``end`` may not give the reversed path.

    Example:
        >>> list(WalkGrid((0, 0), (5, 3)))
        [(0, 0), (1, 0), (1, 1), (2, 1), (2, 2), (3, 2), (4, 2), (4, 3), (5, 3)]
    """

    def __next__(self) -> Point[int]:
        if self._exhausted():
            raise StopIteration

        point = (self._x, self._y)

        if self._compare() < 0:
            self._step_x()
        else:
            self._step_y()

        return point


class Supercover(_GridWalk):
    """
    Like ``WalkGrid``, but steps diagonally where the line passes exactly
    through a grid corner.

    Always symmetric: ``Supercover(a, b)`` is the reverse of
    ``Supercover(b, a)``.

    Example:
        >>> list(Supercover((0, 0), (3, 1)))
        [(0, 0), (1, 0), (2, 1), (3, 1)]
    """

    def __next__(self) -> Point[int]:
        if self._exhausted():
            raise StopIteration

        point = (self._x, self._y)
        comparison = self._compare()

        if comparison == 0:
            self._step_x()
            self._step_y()
        elif comparison < 0:
            self._step_x()
        else:
            self._step_y()

        return point


def walk_grid(start: Point[int], end: Point[int]) -> List[Point[int]]:
    """Collect an orthogonal grid walk into a list."""
    return WalkGrid(start, end).collect()


def supercover(start: Point[int], end: Point[int]) -> List[Point[int]]:
    """Collect a supercover walk into a list."""
    return Supercover(start, end).collect()
