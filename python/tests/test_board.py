"""Board model: moves, heuristic, goal test and parity."""

from __future__ import annotations

import pytest

from npuzzle.errors import MalformedInputError
from npuzzle.models.board import BLANK, DIRECTIONS, Board, Direction, goal_layout


def test_goal_layout() -> None:
    assert goal_layout(2) == (0, 1, 2, BLANK)
    board = Board.goal(3)
    assert board.blank == 8
    assert board.is_solved()
    assert board.heuristic() == 0
    assert board.misplaced_count() == 0


def test_from_flat_validates() -> None:
    with pytest.raises(MalformedInputError):
        Board.from_flat(1, [-1])
    with pytest.raises(MalformedInputError, match="Expected 4 values"):
        Board.from_flat(2, [0, 1, -1])
    with pytest.raises(MalformedInputError, match="Blank"):
        Board.from_flat(2, [0, 1, 2, 3])
    with pytest.raises(MalformedInputError, match="exactly one blank"):
        Board.from_flat(2, [0, -1, 1, -1])
    with pytest.raises(MalformedInputError, match="each exactly once"):
        Board.from_flat(2, [0, 0, 1, -1])


def test_rows_and_tiles(goal3: Board) -> None:
    assert goal3.rows() == [[0, 1, 2], [3, 4, 5], [6, 7, -1]]
    assert goal3.blank_pos == (2, 2)
    assert goal3.is_tile_correct(2, 2)


def test_apply_move_off_grid_is_rejected(goal3: Board) -> None:
    before = goal3.copy()
    assert not goal3.apply_move(Direction.DOWN)
    assert not goal3.apply_move(Direction.RIGHT)
    assert goal3 == before


def test_apply_move_swaps_blank(goal3: Board) -> None:
    assert goal3.apply_move(Direction.UP)
    assert goal3.rows() == [[0, 1, 2], [3, 4, -1], [6, 7, 5]]
    assert goal3.blank == 5


@pytest.mark.parametrize("seed", range(5))
def test_move_then_opposite_restores(scrambled, seed: int) -> None:
    board = scrambled(4, 30, seed)
    for direction in DIRECTIONS:
        before = board.copy()
        if board.apply_move(direction):
            assert board.apply_move(direction.opposite)
        assert board == before


@pytest.mark.parametrize("seed", range(5))
def test_each_move_changes_heuristic_by_one(scrambled, seed: int) -> None:
    board = scrambled(3, 25, seed)
    h = board.heuristic()
    assert h >= 0
    for direction in DIRECTIONS:
        child = board.copy()
        if child.apply_move(direction):
            assert abs(child.heuristic() - h) == 1


def test_misplaced_counts_blank(goal3: Board) -> None:
    goal3.apply_move(Direction.LEFT)
    # tile 7 and the blank are both out of place
    assert goal3.misplaced_count() == 2
    assert not goal3.is_goal()


@pytest.mark.parametrize("seed", range(6))
def test_goal_iff_no_misplaced(scrambled, seed: int) -> None:
    board = scrambled(3, seed, seed)
    assert board.is_goal() == (board.misplaced_count() == 0)


def test_inversions() -> None:
    board = Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, -1])
    assert board.inversions() == 1
    reversed_board = Board.from_flat(3, [7, 6, 5, 4, 3, 2, 1, 0, -1])
    assert reversed_board.inversions() == 28


@pytest.mark.parametrize("size", [2, 3, 4, 5])
@pytest.mark.parametrize("seed", range(4))
def test_random_walks_stay_solvable(scrambled, size: int, seed: int) -> None:
    board = scrambled(size, 2 * (10 + seed), seed)
    assert board.is_solvable()

    tiles = [i for i, v in enumerate(board.tiles) if v != BLANK]
    a, b = tiles[0], tiles[1]
    board.tiles[a], board.tiles[b] = board.tiles[b], board.tiles[a]
    assert not board.is_solvable()


def test_even_size_blank_row_parity() -> None:
    # Blank moved up from the goal: one inversion, blank on the second row from the bottom.
    up = Board.from_flat(2, [0, -1, 2, 1])
    assert up.inversions() == 1
    assert up.is_solvable()
    assert not Board.from_flat(2, [1, 0, 2, -1]).is_solvable()
