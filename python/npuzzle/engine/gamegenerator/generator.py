"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from npuzzle.errors import MalformedInputError
from npuzzle.models.board import BLANK, DIRECTIONS, Board, Direction

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles, either by shuffling or by walking from the goal."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        if size <= 1:
            raise MalformedInputError("Puzzle size must be greater than 1.")
        return Board.goal(size)

    @staticmethod
    def shuffled(size: int, rng: random.Random | None = None) -> Board:
        """Return a uniformly shuffled board, corrected to be solvable."""
        rng = rng or random.Random()
        tiles = GameGenerator.solved(size).tiles
        rng.shuffle(tiles)
        board = Board(size=size, tiles=tiles, blank=tiles.index(BLANK))
        GameGenerator.make_solvable(board)
        return board

    @staticmethod
    def make_solvable(board: Board) -> None:
        """Swap the first two tiles in-place if *board* fails the parity check.

        A single transposition of two tiles flips the inversion parity
        and leaves the blank where it is.
        """
        if board.is_solvable():
            return
        first, second = [i for i, v in enumerate(board.tiles) if v != BLANK][:2]
        board.tiles[first], board.tiles[second] = board.tiles[second], board.tiles[first]
        logger.debug("Swapped cells %d and %d to fix parity", first, second)

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random | None = None) -> list[Direction]:
        """Scramble *board* in-place with *steps* random legal moves.

        Immediate backtracks are avoided when another move exists.
        Returns the moves applied.
        """
        rng = rng or random.Random()
        applied: list[Direction] = []
        prev: Direction | None = None

        for _ in range(steps):
            candidates = [d for d in DIRECTIONS if GameGenerator._is_legal(board, d)]
            if prev is not None and prev.opposite in candidates and len(candidates) > 1:
                candidates.remove(prev.opposite)
            direction = rng.choice(candidates)
            board.apply_move(direction)
            applied.append(direction)
            prev = direction
        return applied

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board that is not already solved."""
        rng = rng or random.Random()
        board = GameGenerator.shuffled(size, rng)
        while board.is_solved():
            board = GameGenerator.shuffled(size, rng)
        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _is_legal(board: Board, direction: Direction) -> bool:
        r, c = board.blank_pos
        dr, dc = direction.offset
        return 0 <= r + dr < board.size and 0 <= c + dc < board.size
