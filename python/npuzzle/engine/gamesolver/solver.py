"""Sliding puzzle solver."""

from __future__ import annotations

import logging

from npuzzle.engine.gamesolver.a_star import AStarSearch
from npuzzle.engine.gamesolver.config import Algorithm, SolverConfig
from npuzzle.engine.gamesolver.ida_star import IDASearch
from npuzzle.engine.gamesolver.result import SearchResult, Termination
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)

_ENGINES = {
    Algorithm.ida: IDASearch,
    Algorithm.astar: AStarSearch,
}


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(
        board: Board,
        algorithm: Algorithm = Algorithm.ida,
        config: SolverConfig | None = None,
    ) -> SearchResult:
        """Run one optimal search and report its outcome.

        Boards that fail the parity check are rejected without searching
        unless ``config.check_solvable`` is off.
        """
        config = config or SolverConfig()
        if config.check_solvable and not Solver.is_solvable(board):
            logger.info("Board fails the parity check; not searching.")
            return SearchResult(algorithm=algorithm, termination=Termination.unsolvable)

        result = _ENGINES[algorithm](board, config).run()
        logger.info(
            "%s finished: termination=%s length=%s expanded=%d in %.3fs",
            algorithm.value, result.termination.value, result.length,
            result.expanded, result.elapsed,
        )
        return result

    @staticmethod
    def solve(board: Board, algorithm: Algorithm = Algorithm.ida) -> list[Direction]:
        """Return a shortest move sequence for *board*, or ``[]`` if unsolvable."""
        if board.is_solved():
            return []
        return Solver.search(board, algorithm).moves or []

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return board.is_solvable()
