"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while reporting the same
information as the vanilla frontend.
"""

from __future__ import annotations

import logging
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.gamesolver import Algorithm, SearchResult, Termination
from npuzzle.models.board import BLANK, Board

console = Console()
err_console = Console(stderr=True)

_ALGORITHM_NAMES = {
    Algorithm.ida: "IDA*",
    Algorithm.astar: "A*",
}

_FAILURES = {
    Termination.unsolvable: "Puzzle is unsolvable (parity check).",
    Termination.exhausted: "Search space exhausted.",
    Termination.node_limit: "Search node limit reached.",
}


def log_handler() -> logging.Handler:
    return RichHandler(console=err_console, show_path=False)


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 2))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _misplaced(board: Board, label: str) -> Text:
    text = Text()
    text.append(f"  {label}: ", style="dim")
    text.append(str(board.misplaced_count()), style="bold yellow")
    return text


# -- screens ------------------------------------------------------------------


def show_error(message: str) -> None:
    err_console.print(f"[bold red]{message}[/bold red]")


def show_generated(path: Path, board: Board) -> None:
    panel = Panel(
        Align.center(_render_board(board)),
        title=f"[bold cyan]Generated {board.size}×{board.size}[/bold cyan]",
        subtitle=f"[dim]{path}[/dim]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print(panel)


def show_applied(board: Board, moves_path: Path) -> None:
    body = Group(
        Align.center(_render_board(board)),
        Text(""),
        _misplaced(board, "Tiles out of place"),
    )
    console.print(
        Panel(
            body,
            title=f"[bold cyan]After {moves_path.name}[/bold cyan]",
            border_style="bright_blue",
            padding=(1, 2),
        )
    )


def show_solving(board: Board, moves_path: Path, algorithm: Algorithm) -> None:
    body = Group(
        Align.center(_render_board(board)),
        Text(""),
        _misplaced(board, "Initial tiles out of place"),
    )
    console.print(
        Panel(
            body,
            title=f"[bold yellow]Solving with {_ALGORITHM_NAMES[algorithm]}[/bold yellow]",
            subtitle=f"[dim]{moves_path.name} empty or missing[/dim]",
            border_style="yellow",
            padding=(1, 2),
        )
    )


def show_result(result: SearchResult, final: Board, max_bound: int) -> None:
    stats = Table(show_header=False, box=rich.box.SIMPLE, padding=(0, 1))
    stats.add_column(style="dim")
    stats.add_column(style="bold yellow", justify="right")

    if result.solved:
        stats.add_row("Shortest solution length", f"{result.length} moves")
        stats.add_row("Tiles out of place", str(final.misplaced_count()))
        title = "[bold green]Solved[/bold green]"
        style = "green"
    else:
        reason = _FAILURES.get(result.termination, f"Search bound exceeded {max_bound}.")
        stats.add_row("Result", f"{reason} No solution found.")
        title = "[bold red]No solution[/bold red]"
        style = "red"

    stats.add_row("States expanded", str(result.expanded))
    stats.add_row("Time", f"{result.elapsed:.3f}s")
    console.print(Panel(stats, title=title, border_style=style, padding=(0, 2)))
