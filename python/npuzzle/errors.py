"""Exception hierarchy shared by the models, engine and CLI."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error the CLI reports and exits on."""


class MalformedInputError(PuzzleError, ValueError):
    """A puzzle description or size argument cannot be used."""


class InvalidMoveError(PuzzleError):
    """A supplied move would push the blank off the grid."""

    def __init__(self, line: int, direction: str) -> None:
        super().__init__(f"Invalid move at line {line}.")
        self.line = line
        self.direction = direction
