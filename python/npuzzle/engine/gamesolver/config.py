"""Search limits and algorithm selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Algorithm(StrEnum):
    ida = "ida"
    astar = "astar"


# Each IDA* level is one Python frame, so the ceiling stays well under
# the interpreter's recursion limit.
DEFAULT_MAX_BOUND = 500
DEFAULT_MAX_NODES = 5_000_000


@dataclass(frozen=True)
class SolverConfig:
    max_bound: int = DEFAULT_MAX_BOUND
    max_nodes: int = DEFAULT_MAX_NODES
    check_solvable: bool = True
