"""Outcome of a single search run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from npuzzle.engine.gamesolver.config import Algorithm
from npuzzle.models.board import Direction


class Termination(StrEnum):
    ok = "ok"
    unsolvable = "unsolvable"
    exhausted = "exhausted"
    bound = "bound"
    node_limit = "node_limit"


@dataclass
class SearchResult:
    algorithm: Algorithm
    termination: Termination
    moves: list[Direction] | None = None
    expanded: int = 0
    generated: int = 0
    bound: int | None = None
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.termination is Termination.ok

    @property
    def length(self) -> int | None:
        return None if self.moves is None else len(self.moves)
