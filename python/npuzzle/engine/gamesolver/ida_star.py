"""Iterative-deepening A* over a single board mutated in place."""

from __future__ import annotations

import logging
import math
from time import perf_counter

from npuzzle.engine.gamesolver.config import Algorithm, SolverConfig
from npuzzle.engine.gamesolver.result import SearchResult, Termination
from npuzzle.models.board import DIRECTIONS, Board, Direction

logger = logging.getLogger(__name__)

FOUND = -1


class IDASearch:
    """Repeated bounded depth-first passes with growing f-cutoffs.

    Memory stays O(depth): one board, applied and undone move by move,
    plus the move path of the current branch.
    """

    def __init__(self, board: Board, config: SolverConfig | None = None) -> None:
        self.board = board.copy()
        self.config = config or SolverConfig()
        self.path: list[Direction] = []
        self.bound = 0
        self.expanded = 0

    def run(self) -> SearchResult:
        t0 = perf_counter()
        self.bound = self.board.heuristic()

        while True:
            if self.bound > self.config.max_bound:
                logger.info(
                    "IDA* bound %d exceeded ceiling %d after %d expansions",
                    self.bound, self.config.max_bound, self.expanded,
                )
                return self._result(Termination.bound, t0)

            logger.debug("IDA* pass: bound=%d expanded=%d", self.bound, self.expanded)
            self.path.clear()
            t = self._search(0, None)

            if t == FOUND:
                return self._result(Termination.ok, t0, moves=list(self.path))
            if t == math.inf:
                return self._result(Termination.exhausted, t0)
            self.bound = int(t)

    def _search(self, g: int, prev: Direction | None) -> int | float:
        """Explore below the current board within ``self.bound``.

        Returns ``FOUND`` with the solution left in ``self.path``, the
        smallest f that overflowed the bound, or ``math.inf`` when no
        branch overflowed. The board is back in its entry layout on
        every return.
        """
        board = self.board
        f = g + board.heuristic()
        if f > self.bound:
            return f
        if board.is_goal():
            return FOUND

        self.expanded += 1
        minimum: int | float = math.inf

        for direction in DIRECTIONS:
            if prev is not None and direction is prev.opposite:
                continue
            if not board.apply_move(direction):
                continue

            self.path.append(direction)
            try:
                t = self._search(g + 1, direction)
            finally:
                board.apply_move(direction.opposite)

            if t == FOUND:
                return FOUND
            self.path.pop()
            if t < minimum:
                minimum = t

        return minimum

    def _result(
        self, termination: Termination, t0: float, moves: list[Direction] | None = None
    ) -> SearchResult:
        return SearchResult(
            algorithm=Algorithm.ida,
            termination=termination,
            moves=moves,
            expanded=self.expanded,
            bound=self.bound,
            elapsed=perf_counter() - t0,
        )
