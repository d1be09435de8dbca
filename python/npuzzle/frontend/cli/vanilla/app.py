"""Vanilla terminal frontend — no third-party dependencies.

Prints plain, stable lines so the output can be diffed or parsed by
scripts.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from npuzzle.engine.gamesolver import Algorithm, SearchResult, Termination
from npuzzle.models.board import Board
from npuzzle.models.puzzlefile import format_board

_ALGORITHM_NAMES = {
    Algorithm.ida: "divide-and-conquer search (IDA*)",
    Algorithm.astar: "best-first search (A*)",
}


def log_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    return handler


def show_error(message: str) -> None:
    print(message, file=sys.stderr)


def show_generated(path: Path, board: Board) -> None:
    print(f"Generated {path.name} for {board.size}x{board.size} puzzle.")


def show_applied(board: Board, moves_path: Path) -> None:
    print(f"Final state after applying {moves_path.name}:")
    print(format_board(board))
    print(f"Tiles out of place: {board.misplaced_count()}")


def show_solving(board: Board, moves_path: Path, algorithm: Algorithm) -> None:
    print(f"{moves_path.name} empty or missing. Solving with {_ALGORITHM_NAMES[algorithm]}.")
    print(f"Initial tiles out of place: {board.misplaced_count()}")


def show_result(result: SearchResult, final: Board, max_bound: int) -> None:
    if result.solved:
        print(f"Shortest solution length: {result.length} moves")
        print(f"Tiles out of place: {final.misplaced_count()}")
    elif result.termination is Termination.unsolvable:
        print("Puzzle is unsolvable (parity check). No solution found.")
    elif result.termination is Termination.bound:
        print(f"Search bound exceeded {max_bound}. No solution found.")
    elif result.termination is Termination.node_limit:
        print("Search node limit reached. No solution found.")
    else:
        print("No solution found.")
    print(f"States expanded: {result.expanded}")
