"""Best-known path cost per grid, keyed by a 64-bit fingerprint."""

from __future__ import annotations

import hashlib
from array import array
from collections.abc import Sequence


def fingerprint(tiles: Sequence[int]) -> int:
    """Order-sensitive 64-bit digest of a grid's contents."""
    digest = hashlib.blake2b(array("i", tiles).tobytes(), digest_size=8).digest()
    return int.from_bytes(digest, "little")


class VisitedTable:
    """Maps grid fingerprints to the cheapest ``g`` seen for that grid.

    Each fingerprint owns a chain of ``[grid, g]`` entries; lookups
    always confirm the grid itself, so colliding fingerprints never
    merge distinct grids.
    """

    def __init__(self) -> None:
        self._buckets: dict[int, list[list]] = {}
        self._size = 0

    def _find(self, fp: int, grid: tuple[int, ...]) -> list | None:
        for entry in self._buckets.get(fp, ()):
            if entry[0] == grid:
                return entry
        return None

    def should_skip(self, fp: int, grid: tuple[int, ...], g: int) -> bool:
        """Decide whether a path of cost *g* to *grid* is worth expanding.

        Skip when an equal or cheaper cost is recorded. A strictly
        cheaper *g* overwrites the recorded cost and is not skipped.
        """
        entry = self._find(fp, grid)
        if entry is None:
            return False
        if entry[1] <= g:
            return True
        entry[1] = g
        return False

    def record(self, fp: int, grid: tuple[int, ...], g: int) -> None:
        entry = self._find(fp, grid)
        if entry is None:
            self._buckets.setdefault(fp, []).append([grid, g])
            self._size += 1
        elif g < entry[1]:
            entry[1] = g

    def best_g(self, fp: int, grid: tuple[int, ...]) -> int | None:
        entry = self._find(fp, grid)
        return None if entry is None else entry[1]

    def __len__(self) -> int:
        return self._size
