from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from time import perf_counter
import logging

from src.domains.board import Board
from src.search.frontier import Frontier

logger = logging.getLogger(__name__)


class SearchTimeout(RuntimeError):
    """Raised when a time or expansion limit stops the search early."""
    def __init__(self, message: str, stats: Dict[str, object]):
        super().__init__(message)
        self.stats = stats


@dataclass(eq=False)
class SearchNode:
    board: Board
    g: int
    parent: Optional["SearchNode"] = None
    from_twin: bool = False
    f: int = field(init=False)

    def __post_init__(self):
        self.f = self.g + self.board.manhattan()


def node_priority(node: SearchNode) -> Tuple[int, int]:
    """Lower f first; on ties prefer the board closer to the goal."""
    return (node.f, node.board.manhattan())


class Solver:
    """
    A* with the Manhattan heuristic over one frontier holding two searches:
    the initial board and its twin. Exactly one of the two can reach the goal,
    so whichever lineage gets there first decides solvability.
    """
    def __init__(
        self,
        initial: Board,
        timeout_sec: float | None = None,
        max_expansions: int | None = None,
    ):
        self.initial = initial
        self.timeout_sec = timeout_sec
        self.max_expansions = max_expansions

        self._solvable = False
        self._moves = -1
        self._solution: List[Board] = []

        self.expanded = 0
        self.generated = 0
        self.peak_open = 0
        self.time_sec = 0.0
        self.termination = "running"

        logger.debug("Starting board:\n%s", initial)
        frontier: Frontier[SearchNode] = Frontier(key=node_priority)
        frontier.push(SearchNode(initial, 0, None, False))
        frontier.push(SearchNode(initial.twin(), 0, None, True))
        self._solve(frontier)

    def _limit_hit(self, t0: float) -> Optional[str]:
        if self.timeout_sec is not None and (perf_counter() - t0) > self.timeout_sec:
            return f"timed out after {self.timeout_sec}s"
        if self.max_expansions is not None and self.expanded >= self.max_expansions:
            return f"reached {self.max_expansions} expansions"
        return None

    def _solve(self, frontier: Frontier[SearchNode]) -> None:
        t0 = perf_counter()
        self.peak_open = len(frontier)
        current = frontier.pop()

        while not current.board.is_goal():
            reason = self._limit_hit(t0)
            if reason is not None:
                self.time_sec = perf_counter() - t0
                self.termination = "timeout"
                logger.warning("Search stopped: %s (expanded=%d)", reason, self.expanded)
                raise SearchTimeout(reason, self.stats())

            self.expanded += 1
            for neighbor in current.board.neighbors():
                child = SearchNode(neighbor, current.g + 1, current, current.from_twin)
                self.generated += 1
                # Skip the grandparent even though neighbors() already filters it.
                if current.parent is None or neighbor != current.parent.board:
                    frontier.push(child)
            self.peak_open = max(self.peak_open, len(frontier))
            current = frontier.pop()

        self.time_sec = perf_counter() - t0
        self.termination = "ok"

        if current.from_twin:
            self._solvable = False
            self._moves = -1
            self._solution = []
        else:
            self._solvable = True
            self._moves = current.f
            self._solution = reconstruct_path(current)

        logger.info(
            "Solved in %.4fs: solvable=%s moves=%d expanded=%d generated=%d peak_open=%d",
            self.time_sec, self._solvable, self._moves,
            self.expanded, self.generated, self.peak_open,
        )

    def is_solvable(self) -> bool:
        return self._solvable

    def moves(self) -> int:
        """Minimum number of moves to solve the initial board; -1 if unsolvable."""
        return self._moves

    def solution(self) -> List[Board]:
        """Boards from the initial board to the goal; empty if unsolvable."""
        return list(self._solution)

    def stats(self) -> Dict[str, object]:
        return {
            "algorithm": "A*+twin",
            "g": self._moves if self.termination == "ok" else None,
            "expanded": self.expanded,
            "generated": self.generated,
            "peak_open": self.peak_open,
            "time": self.time_sec,
            "termination": self.termination,
        }


def reconstruct_path(node: SearchNode) -> List[Board]:
    path: List[Board] = []
    cur: Optional[SearchNode] = node
    while cur is not None:
        path.append(cur.board)
        cur = cur.parent
    path.reverse()
    return path
