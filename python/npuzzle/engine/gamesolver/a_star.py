"""Best-first graph search with an arena of parent-linked nodes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter

from npuzzle.engine.gamesolver.config import Algorithm, SolverConfig
from npuzzle.engine.gamesolver.frontier import PriorityFrontier
from npuzzle.engine.gamesolver.result import SearchResult, Termination
from npuzzle.engine.gamesolver.visited import VisitedTable, fingerprint
from npuzzle.models.board import DIRECTIONS, Board, Direction, goal_layout

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchNode:
    tiles: tuple[int, ...]
    blank: int
    g: int
    h: int
    fp: int
    move: Direction | None = None
    parent: int | None = None  # arena index


class AStarSearch:
    """A* over copies of the start board.

    Every node lives in ``arena`` until the run ends, so parent indices
    stay valid for reconstruction. The root board is never mutated.
    """

    def __init__(self, board: Board, config: SolverConfig | None = None) -> None:
        self.start = board.copy()
        self.config = config or SolverConfig()
        self.arena: list[SearchNode] = []
        self.frontier: PriorityFrontier[int] = PriorityFrontier()
        self.visited = VisitedTable()
        self.expanded = 0

    def run(self) -> SearchResult:
        t0 = perf_counter()
        try:
            return self._run(t0)
        finally:
            generated = len(self.arena)
            self.arena = []
            self.frontier = PriorityFrontier()
            self.visited = VisitedTable()
            logger.debug("A* released %d nodes", generated)

    def _run(self, t0: float) -> SearchResult:
        size = self.start.size
        goal = goal_layout(size)

        root_tiles = self.start.key()
        root = SearchNode(
            tiles=root_tiles,
            blank=self.start.blank,
            g=0,
            h=self.start.heuristic(),
            fp=fingerprint(root_tiles),
        )
        self.arena.append(root)
        self.frontier.push(0, root.g, root.h)
        self.visited.record(root.fp, root.tiles, root.g)

        while self.frontier:
            index = self.frontier.pop()
            node = self.arena[index]

            # A cheaper path to this grid was queued after this entry.
            if node.g > self.visited.best_g(node.fp, node.tiles):
                continue

            if node.tiles == goal:
                moves = self.reconstruct(index)
                logger.debug("A* reached goal at g=%d", node.g)
                return self._result(Termination.ok, t0, moves=moves)

            self.expanded += 1

            for direction in DIRECTIONS:
                if node.move is not None and direction is node.move.opposite:
                    continue
                child = Board(size=size, tiles=list(node.tiles), blank=node.blank)
                if not child.apply_move(direction):
                    continue

                g = node.g + 1
                tiles = child.key()
                fp = fingerprint(tiles)
                if self.visited.should_skip(fp, tiles, g):
                    continue

                if len(self.arena) >= self.config.max_nodes:
                    logger.info(
                        "A* node limit %d reached after %d expansions",
                        self.config.max_nodes, self.expanded,
                    )
                    return self._result(Termination.node_limit, t0)

                self.arena.append(
                    SearchNode(
                        tiles=tiles,
                        blank=child.blank,
                        g=g,
                        h=child.heuristic(),
                        fp=fp,
                        move=direction,
                        parent=index,
                    )
                )
                child_index = len(self.arena) - 1
                self.frontier.push(child_index, g, self.arena[child_index].h)
                self.visited.record(fp, tiles, g)

        return self._result(Termination.exhausted, t0)

    def reconstruct(self, index: int) -> list[Direction]:
        """Walk parent links from *index* back to the root."""
        moves: list[Direction] = []
        node = self.arena[index]
        while node.parent is not None:
            moves.append(node.move)
            node = self.arena[node.parent]
        moves.reverse()
        return moves

    def _result(
        self, termination: Termination, t0: float, moves: list[Direction] | None = None
    ) -> SearchResult:
        return SearchResult(
            algorithm=Algorithm.astar,
            termination=termination,
            moves=moves,
            expanded=self.expanded,
            generated=len(self.arena),
            elapsed=perf_counter() - t0,
        )
