"""Open list for A*: a binary min-heap keyed by ``(f, h)``."""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityFrontier(Generic[T]):
    """Min-heap ordered by ``f = g + h``, ties broken by smaller ``h``.

    Remaining ties pop in insertion order, which keeps searches
    deterministic and never compares the items themselves.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int, T]] = []
        self._counter = itertools.count()

    def push(self, item: T, g: int, h: int) -> None:
        heapq.heappush(self._heap, (g + h, h, next(self._counter), item))

    def pop(self) -> T:
        """Remove and return the item with the smallest key.

        Raises ``IndexError`` when empty.
        """
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
