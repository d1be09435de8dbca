"""Board model for the N-puzzle."""

from __future__ import annotations

from bisect import bisect_left, insort
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache

from npuzzle.errors import MalformedInputError

BLANK = -1


class Direction(StrEnum):
    """Direction the *blank* travels in; the tile it meets slides the other way."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OPPOSITE: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

# Expansion order shared by both searches.
DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


@lru_cache(maxsize=None)
def goal_layout(size: int) -> tuple[int, ...]:
    """Cell ``i`` holds tile ``i``; the last cell is blank."""
    return tuple(range(size * size - 1)) + (BLANK,)


@dataclass
class Board:
    """Represents an n×n sliding puzzle.

    Tiles are stored row-major in a flat list; ``BLANK`` (-1) marks the
    empty cell and ``blank`` is its index.
    """

    size: int
    tiles: list[int]
    blank: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, -1, 7])
        """
        if size <= 1:
            raise MalformedInputError(f"Puzzle size must be greater than 1, got {size}.")
        count = size * size
        if len(flat) != count:
            raise MalformedInputError(
                f"Expected {count} values for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        blanks = [i for i, v in enumerate(flat) if v == BLANK]
        if not blanks:
            raise MalformedInputError("Blank tile (-1) not found.")
        if len(blanks) > 1:
            raise MalformedInputError(
                f"Expected exactly one blank tile (-1), found {len(blanks)}."
            )
        tiles = sorted(v for v in flat if v != BLANK)
        if tiles != list(range(count - 1)):
            raise MalformedInputError(
                f"Tiles must be the values 0..{count - 2}, each exactly once."
            )
        return cls(size=size, tiles=list(flat), blank=blanks[0])

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        return cls.from_flat(len(rows), [v for row in rows for v in row])

    @classmethod
    def goal(cls, size: int) -> Board:
        return cls(size=size, tiles=list(goal_layout(size)), blank=size * size - 1)

    # -- queries --------------------------------------------------------------

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank, self.size)

    def rows(self) -> list[list[int]]:
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def is_solved(self) -> bool:
        """Check if the board equals the goal layout."""
        return tuple(self.tiles) == goal_layout(self.size)

    is_goal = is_solved

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific cell holds its goal content."""
        idx = row * self.size + col
        return self.tiles[idx] == goal_layout(self.size)[idx]

    def misplaced_count(self) -> int:
        """Number of cells, blank included, that differ from the goal."""
        goal = goal_layout(self.size)
        return sum(1 for have, want in zip(self.tiles, goal) if have != want)

    def heuristic(self) -> int:
        """Sum of Manhattan distances of every tile to its goal cell."""
        n = self.size
        dist = 0
        for idx, value in enumerate(self.tiles):
            if value == BLANK:
                continue
            r, c = divmod(idx, n)
            gr, gc = divmod(value, n)
            dist += abs(r - gr) + abs(c - gc)
        return dist

    def inversions(self) -> int:
        """Count tile pairs out of order, ignoring the blank."""
        inv = 0
        seen: list[int] = []
        for v in self.tiles:
            if v == BLANK:
                continue
            inv += len(seen) - bisect_left(seen, v)
            insort(seen, v)
        return inv

    def is_solvable(self) -> bool:
        """Return True if the goal layout is reachable from this board."""
        n = self.size
        inv = self.inversions()
        if n % 2 == 1:
            return inv % 2 == 0
        blank_row_from_bottom = n - self.blank // n
        if blank_row_from_bottom % 2 == 0:
            return inv % 2 == 1
        return inv % 2 == 0

    def key(self) -> tuple[int, ...]:
        return tuple(self.tiles)

    # -- mutation -------------------------------------------------------------

    def apply_move(self, direction: Direction) -> bool:
        """Move the blank one cell in *direction*.

        Returns False, leaving the board untouched, when the blank would
        leave the grid.
        """
        n = self.size
        r, c = divmod(self.blank, n)
        dr, dc = direction.offset
        tr, tc = r + dr, c + dc
        if not (0 <= tr < n and 0 <= tc < n):
            return False

        target = tr * n + tc
        self.tiles[self.blank] = self.tiles[target]
        self.tiles[target] = BLANK
        self.blank = target
        return True

    def copy(self) -> Board:
        return Board(size=self.size, tiles=self.tiles[:], blank=self.blank)
