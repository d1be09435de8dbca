"""Replays move sequences against a board."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from npuzzle.errors import InvalidMoveError
from npuzzle.models.board import Board, Direction
from npuzzle.models.puzzlefile import MoveEntry

logger = logging.getLogger(__name__)


class GamePlay:
    """Applies moves to a board and tracks how many were played."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Start a session on a copy of *board*."""
        return cls(board.copy())

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Move the blank one cell.  Returns True if the move was valid."""
        if not self.board.apply_move(direction):
            return False
        self.moves += 1
        return True

    def apply_moves(self, entries: Iterable[MoveEntry]) -> None:
        """Apply supplied moves in order.

        Raises ``InvalidMoveError`` with the entry's line number at the
        first move that would leave the grid; later moves are not applied.
        """
        for entry in entries:
            if not self.move(entry.direction):
                logger.debug(
                    "Rejected %s at line %d, blank at %s",
                    entry.direction.value, entry.line, self.board.blank_pos,
                )
                raise InvalidMoveError(entry.line, entry.direction.value)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
