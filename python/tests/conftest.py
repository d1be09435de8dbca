from __future__ import annotations

import random

import pytest

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.models.board import Board


@pytest.fixture
def goal3() -> Board:
    return Board.goal(3)


@pytest.fixture
def scrambled():
    """Factory for reproducible random-walk boards."""

    def make(size: int, steps: int, seed: int) -> Board:
        board = GameGenerator.solved(size)
        GameGenerator.scramble(board, steps, random.Random(seed))
        return board

    return make
