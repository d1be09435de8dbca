"""N-puzzle solver command line.

Usage::

    npuzzle generate 4              # write a random solvable 4×4 to ini.txt
    npuzzle run                     # apply move.txt, or solve if it is empty
    npuzzle run -a astar -f rich    # solve with A*, Rich output
"""

from __future__ import annotations

import importlib
import logging
import random
from enum import StrEnum
from pathlib import Path
from types import ModuleType
from typing import Optional

import typer

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gameplay import GamePlay
from npuzzle.engine.gamesolver import Algorithm, Solver, SolverConfig
from npuzzle.engine.gamesolver.config import DEFAULT_MAX_BOUND, DEFAULT_MAX_NODES
from npuzzle.errors import PuzzleError
from npuzzle.models.puzzlefile import read_moves, read_puzzle, write_moves, write_puzzle

DEFAULT_PUZZLE = Path("ini.txt")
DEFAULT_MOVES = Path("move.txt")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _load_frontend(frontend: Frontend, verbose: int) -> ModuleType:
    ui = importlib.import_module(_RUNNERS[frontend])
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(message)s", handlers=[ui.log_handler()], force=True)
    return ui


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Optimal N-puzzle solver (IDA* / A*).")

_FRONTEND_OPTION = typer.Option(
    Frontend.vanilla, "-f", "--frontend",
    envvar="NPUZZLE_FRONTEND",
    help="Output style.",
)
_PUZZLE_OPTION = typer.Option(
    DEFAULT_PUZZLE, "-p", "--puzzle",
    envvar="NPUZZLE_PUZZLE",
    help="Puzzle description file.",
)
_VERBOSE_OPTION = typer.Option(
    0, "-v", "--verbose", count=True,
    help="Log search progress (-vv for debug).",
)


@app.command()
def generate(
    size: int = typer.Argument(..., help="Puzzle dimension n (n > 1)."),
    puzzle: Path = _PUZZLE_OPTION,
    frontend: Frontend = _FRONTEND_OPTION,
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible puzzle."),
    verbose: int = _VERBOSE_OPTION,
) -> None:
    """Write a random solvable n×n puzzle."""
    ui = _load_frontend(frontend, verbose)
    try:
        board = GameGenerator.generate(size, random.Random(seed))
        write_puzzle(puzzle, board)
    except PuzzleError as exc:
        ui.show_error(str(exc))
        raise typer.Exit(code=1) from exc
    ui.show_generated(puzzle, board)


@app.command()
def run(
    puzzle: Path = _PUZZLE_OPTION,
    moves: Path = typer.Option(
        DEFAULT_MOVES, "-m", "--moves",
        envvar="NPUZZLE_MOVES",
        help="Move file to apply; written with the solution when empty or missing.",
    ),
    algorithm: Algorithm = typer.Option(
        Algorithm.ida, "-a", "--algorithm",
        envvar="NPUZZLE_ALGORITHM",
        help="Search strategy used when solving.",
    ),
    frontend: Frontend = _FRONTEND_OPTION,
    max_bound: int = typer.Option(
        DEFAULT_MAX_BOUND, "--max-bound", min=0,
        help="Give up once the IDA* bound passes this value.",
    ),
    max_nodes: int = typer.Option(
        DEFAULT_MAX_NODES, "--max-nodes", min=1,
        help="Give up once A* has stored this many nodes.",
    ),
    parity_check: bool = typer.Option(
        True, "--parity-check/--no-parity-check",
        help=(
            "Reject unsolvable puzzles before searching. When off, prefer -a astar "
            "for boards that may be unsolvable: IDA* only stops at --max-bound, "
            "which takes impractically long at the default."
        ),
    ),
    verbose: int = _VERBOSE_OPTION,
) -> None:
    """Apply the move file to the puzzle, or solve it when there are no moves."""
    ui = _load_frontend(frontend, verbose)
    try:
        board = read_puzzle(puzzle)
        entries = read_moves(moves)

        if entries is not None:
            game = GamePlay.from_board(board)
            game.apply_moves(entries)
            ui.show_applied(game.board, moves)
            return

        ui.show_solving(board, moves, algorithm)
        config = SolverConfig(max_bound=max_bound, max_nodes=max_nodes, check_solvable=parity_check)
        result = Solver.search(board, algorithm, config)

        final = GamePlay.from_board(board)
        if result.moves is not None:
            for direction in result.moves:
                final.move(direction)
            write_moves(moves, result.moves)
        ui.show_result(result, final.board, max_bound)
    except PuzzleError as exc:
        ui.show_error(str(exc))
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
