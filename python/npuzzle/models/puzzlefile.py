"""Text formats for puzzle descriptions and move sequences.

Puzzle file::

    3
    0,1,2
    3,4,5
    6,-1,7

Move file: one move letter (``U``/``D``/``L``/``R``) per line.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from npuzzle.errors import MalformedInputError
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r"[,\r\n]")
_MOVE_LETTERS = frozenset(d.value for d in Direction)


@dataclass(frozen=True)
class MoveEntry:
    line: int
    direction: Direction


# -- puzzle descriptions ------------------------------------------------------


def parse_puzzle(text: str) -> Board:
    """Build a ``Board`` from the contents of a puzzle file."""
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise MalformedInputError("Puzzle file is empty.")

    try:
        size = int(lines[0].strip())
    except ValueError:
        raise MalformedInputError(f"Invalid puzzle size {lines[0].strip()!r}.") from None
    if size <= 1:
        raise MalformedInputError(f"Puzzle size must be greater than 1, got {size}.")

    count = size * size
    values: list[int] = []
    for token in _TOKEN_SPLIT.split("\n".join(lines[1:])):
        token = token.strip()
        if not token:
            continue
        if len(values) >= count:
            raise MalformedInputError(f"Too many values: expected {count}.")
        try:
            values.append(int(token))
        except ValueError:
            raise MalformedInputError(f"Invalid tile value {token!r}.") from None

    return Board.from_flat(size, values)


def format_board(board: Board) -> str:
    """Comma-separated rows, one row per line."""
    return "\n".join(",".join(str(v) for v in row) for row in board.rows())


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MalformedInputError(f"Failed to open {path}: {exc.strerror}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"{path} is not a UTF-8 text file.") from exc


def read_puzzle(path: Path) -> Board:
    board = parse_puzzle(_read_text(path))
    logger.debug("Loaded %d×%d puzzle from %s", board.size, board.size, path)
    return board


def write_puzzle(path: Path, board: Board) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{board.size}\n{format_board(board)}\n")


# -- move sequences -----------------------------------------------------------


def parse_moves(text: str) -> list[MoveEntry]:
    """Collect the move letters of a move file, keeping their line numbers.

    Blank lines and lines whose first non-blank character is not a move
    letter are ignored.
    """
    entries: list[MoveEntry] = []
    for lineno, line in enumerate(text.splitlines(), 1):
        stripped = line.lstrip(" \t")
        if not stripped:
            continue
        letter = stripped[0]
        if letter in _MOVE_LETTERS:
            entries.append(MoveEntry(line=lineno, direction=Direction(letter)))
    return entries


def read_moves(path: Path) -> list[MoveEntry] | None:
    """Return the supplied moves, or ``None`` if the file is absent or has none."""
    if not path.exists():
        return None
    entries = parse_moves(_read_text(path))
    if not entries:
        return None
    logger.debug("Read %d moves from %s", len(entries), path)
    return entries


def write_moves(path: Path, moves: list[Direction]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{m.value}\n" for m in moves))
