"""
Xiaolin Wu's Anti-Aliased Line Algorithm

Continuous-input line rasterizer that pairs every pixel with a coverage
weight in [0, 1]. In each column the line's real y position ``y`` lights
the pixel at ``floor(y)`` with weight ``1 - fpart(y)`` and the one below it
with weight ``fpart(y)``; when ``y`` is exactly on a row only that pixel is
emitted, with weight 1. The weights of a column always sum to 1.

Steep lines are walked with x and y transposed, and the endpoints are
swapped so the walk always runs left to right in that transposed space. As
a result ``XiaolinWu(a, b)`` and ``XiaolinWu(b, a)`` are identical.

A gradient of exactly 0 is replaced by 1, so an axis-aligned segment is
drawn as a 45 degree diagonal from its start pixel rather than along its
row or column.

Reference: https://en.wikipedia.org/wiki/Xiaolin_Wu%27s_line_algorithm

Example:
    >>> list(XiaolinWu((0.0, 0.0), (6.0, 3.0)))[:4]
    [((0, 0), 1.0), ((1, 0), 0.5), ((1, 1), 0.5), ((2, 1), 1.0)]
"""

import math
from typing import List, Tuple
import numpy as np

from .numeric import Point, fpart, round_half_away
from .steps import Traversal

CoveredPixel = Tuple[Point[int], float]


class XiaolinWu(Traversal):
    """Iterator over ``((x, y), coverage)`` pairs of an anti-aliased line."""

    def __init__(self, start: Point[float], end: Point[float]):
        """
        Initialize the walk.

        Args:
            start: Real start point
            end: Real end point
        """
        start = (float(start[0]), float(start[1]))
        end = (float(end[0]), float(end[1]))

        self.steep = abs(end[1] - start[1]) > abs(end[0] - start[0])

        if self.steep:
            start = (start[1], start[0])
            end = (end[1], end[0])

        if start[0] > end[0]:
            start, end = end, start

        run = end[0] - start[0]
        # A zero run only happens for a single point, where the gradient is never applied
        self.gradient = (end[1] - start[1]) / run if run != 0 else 0.0
        if self.gradient == 0:
            self.gradient = 1.0

        self._x = round_half_away(start[0])
        self._y = start[1]
        self._end_x = round_half_away(end[0])
        self._lower = False

    def _advance(self):
        self._x += 1
        self._y += self.gradient

    def __next__(self) -> CoveredPixel:
        if self._x > self._end_x:
            raise StopIteration

        fraction = fpart(self._y)
        row = math.floor(self._y)
        if self._lower:
            row += 1

        pixel = (row, self._x) if self.steep else (self._x, row)

        if self._lower:
            self._lower = False
            self._advance()
            return pixel, fraction

        if fraction > 0:
            # Emit the second pixel of this column next time
            self._lower = True
        else:
            self._advance()

        return pixel, 1.0 - fraction

    def to_array(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Drain the remaining items into arrays.

        Returns:
            Tuple of (pixels, coverage) where pixels has shape (N, 2) and
            dtype int64 and coverage has shape (N,) and dtype float64
        """
        items = self.collect()
        pixels = np.array([pixel for pixel, _ in items], dtype=np.int64).reshape(-1, 2)
        coverage = np.array([value for _, value in items], dtype=np.float64)
        return pixels, coverage


def xiaolin_wu(start: Point[float], end: Point[float]) -> List[CoveredPixel]:
    """Collect an anti-aliased line into a list."""
    return XiaolinWu(start, end).collect()
