from npuzzle.models.board import BLANK, DIRECTIONS, Board, Direction, goal_layout
from npuzzle.models.puzzlefile import MoveEntry

__all__ = ["BLANK", "DIRECTIONS", "Board", "Direction", "MoveEntry", "goal_layout"]
