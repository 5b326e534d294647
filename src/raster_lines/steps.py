"""
Traversal Protocol and the Steps Adapter

Every rasterizer in this package is a lazy, single-pass iterator over
coordinate tuples. ``Traversal`` supplies the shared conveniences (pairwise
steps, eager collection, numpy export); ``Steps`` turns any sequence
``p0, p1, p2, ...`` into ``(p0, p1), (p1, p2), ...`` for stepwise consumers
such as animation or incremental collision checks.

Example Usage:
    from raster_lines import WalkGrid

    for start, end in WalkGrid((0, 0), (5, 3)).steps():
        print(start, "->", end)
"""

from typing import Any, Iterable, List, Tuple
import numpy as np

_EMPTY = object()


class Steps:
    """
    Iterator yielding consecutive ``(previous, current)`` pairs.

    Produces ``n - 1`` pairs for an inner sequence of ``n`` items and
    nothing at all when the inner sequence has 0 or 1 items.
    """

    def __init__(self, iterable: Iterable[Any]):
        """
        Wrap a sequence.

        Args:
            iterable: Any iterable; the first item is pulled immediately
        """
        self._iterator = iter(iterable)
        self._previous = next(self._iterator, _EMPTY)

    def __iter__(self) -> "Steps":
        return self

    def __next__(self) -> Tuple[Any, Any]:
        if self._previous is _EMPTY:
            raise StopIteration

        current = next(self._iterator, _EMPTY)
        if current is _EMPTY:
            self._previous = _EMPTY
            raise StopIteration

        previous, self._previous = self._previous, current
        return previous, current


class Traversal:
    """
    Base class for the rasterization iterators.

    Subclasses hold their traversal state in attributes and implement
    ``__next__``. A traversal is consumed as it is iterated; build a new
    instance to walk the same line again.
    """

    # Coordinates per emitted item, used to shape empty arrays
    ndim = 2

    def __iter__(self) -> "Traversal":
        return self

    def __next__(self):
        """Return the next item. Subclasses must override this."""
        raise NotImplementedError

    def steps(self) -> Steps:
        """Wrap the remaining items in a ``Steps`` adapter."""
        return Steps(self)

    def collect(self) -> List[Any]:
        """Drain the remaining items into a list."""
        return list(self)

    def to_array(self) -> np.ndarray:
        """
        Drain the remaining items into an integer array.

        Returns:
            Array of shape (N, ndim) with dtype int64
        """
        return np.array(self.collect(), dtype=np.int64).reshape(-1, self.ndim)

