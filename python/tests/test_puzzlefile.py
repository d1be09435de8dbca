"""Puzzle-file and move-file formats."""

from __future__ import annotations

from pathlib import Path

import pytest

from npuzzle.errors import MalformedInputError
from npuzzle.models.board import Board, Direction
from npuzzle.models.puzzlefile import (
    MoveEntry,
    format_board,
    parse_moves,
    parse_puzzle,
    read_moves,
    read_puzzle,
    write_moves,
    write_puzzle,
)


# -- puzzle descriptions ------------------------------------------------------


def test_parse_puzzle() -> None:
    board = parse_puzzle("3\n0,1,2\n3,4,5\n6,-1,7\n")
    assert board.size == 3
    assert board.blank == 7
    assert board.rows() == [[0, 1, 2], [3, 4, 5], [6, -1, 7]]


def test_parse_puzzle_tolerates_spacing_and_crlf() -> None:
    board = parse_puzzle("2\r\n 0, 1\r\n2 ,-1\r\n\r\n")
    assert board == Board.goal(2)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "empty"),
        ("x\n0,1\n2,-1\n", "Invalid puzzle size"),
        ("1\n-1\n", "greater than 1"),
        ("0\n", "greater than 1"),
        ("2\n0,1\n2\n", "Expected 4 values"),
        ("2\n0,1\n2,-1,3\n", "Too many values"),
        ("2\n0,1\n2,3\n", "Blank"),
        ("2\n0,a\n2,-1\n", "Invalid tile value"),
        ("2\n0,5\n2,-1\n", "each exactly once"),
    ],
)
def test_parse_puzzle_errors(text: str, message: str) -> None:
    with pytest.raises(MalformedInputError, match=message):
        parse_puzzle(text)


def test_puzzle_round_trip(tmp_path: Path) -> None:
    board = Board.from_rows([[3, 1, 2], [0, -1, 5], [6, 7, 4]])
    path = tmp_path / "ini.txt"
    write_puzzle(path, board)

    assert path.read_text() == "3\n3,1,2\n0,-1,5\n6,7,4\n"
    assert read_puzzle(path) == board


def test_read_puzzle_missing_file(tmp_path: Path) -> None:
    with pytest.raises(MalformedInputError, match="Failed to open"):
        read_puzzle(tmp_path / "nope.txt")


def test_read_rejects_non_utf8(tmp_path: Path) -> None:
    puzzle = tmp_path / "ini.txt"
    puzzle.write_bytes(b"2\n0,\xff1\n2,-1\n")
    moves = tmp_path / "move.txt"
    moves.write_bytes(b"U\n\xff\n")

    with pytest.raises(MalformedInputError, match="not a UTF-8 text file"):
        read_puzzle(puzzle)
    with pytest.raises(MalformedInputError, match="not a UTF-8 text file"):
        read_moves(moves)


def test_read_moves_directory_is_an_error(tmp_path: Path) -> None:
    path = tmp_path / "move.txt"
    path.mkdir()
    with pytest.raises(MalformedInputError, match="Failed to open"):
        read_moves(path)


def test_format_board() -> None:
    assert format_board(Board.goal(2)) == "0,1\n2,-1"


# -- move sequences -----------------------------------------------------------


def test_parse_moves_keeps_line_numbers() -> None:
    text = "U\n\n  L\nx ignored\n\tR extra\nd\nD\n"
    assert parse_moves(text) == [
        MoveEntry(line=1, direction=Direction.UP),
        MoveEntry(line=3, direction=Direction.LEFT),
        MoveEntry(line=5, direction=Direction.RIGHT),
        MoveEntry(line=7, direction=Direction.DOWN),
    ]


def test_read_moves_absent_or_empty(tmp_path: Path) -> None:
    path = tmp_path / "move.txt"
    assert read_moves(path) is None
    path.write_text("")
    assert read_moves(path) is None
    path.write_text("\n  \nhello\n")
    assert read_moves(path) is None


def test_write_moves(tmp_path: Path) -> None:
    path = tmp_path / "move.txt"
    write_moves(path, [Direction.RIGHT, Direction.DOWN])
    assert path.read_text() == "R\nD\n"
    assert [e.direction for e in read_moves(path)] == [Direction.RIGHT, Direction.DOWN]

    write_moves(path, [])
    assert path.read_text() == ""
