from __future__ import annotations
from dataclasses import dataclass, field
from itertools import chain
from typing import Callable, Dict, List, Optional
import logging
import time

from hopgrid_core.state import GridState, ForbiddenSet, UidCounter
from hopgrid_core.moves import successors
from .frontier import Frontier

log = logging.getLogger(__name__)

FOUND = "found"
EXHAUSTED = "exhausted"
LIMIT = "limit"


class PathReconstructionError(RuntimeError):
    """Parent links do not lead back to the start state."""


@dataclass
class SearchResult:
    status: str  # FOUND | EXHAUSTED | LIMIT
    nodes: int  # expanded states
    runtime: float
    path: List[GridState] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status == FOUND

    @property
    def solution_len(self) -> int:
        return len(self.path) - 1 if self.path else -1

    def as_row(self) -> Dict[str, object]:
        return {
            "status": self.status,
            "success": self.success,
            "nodes": self.nodes,
            "runtime": self.runtime,
            "solution_len": self.solution_len,
        }


def _greedy(state: GridState, goal: GridState) -> int:
    return state.distance(goal)


class AStar:
    """Best-first search over token patterns, ordered by cost + h(state, goal).

    opened/closed map a pattern (int bitset) to the state first seen with it;
    a pattern is never opened again once it is closed.
    """

    def __init__(
        self,
        start: GridState,
        goal: GridState,
        restricted: Optional[ForbiddenSet] = None,
        counter: Optional[UidCounter] = None,
        h_fn: Optional[Callable[[GridState, GridState], int]] = None,
    ) -> None:
        self.start = start
        self.goal = goal
        self.restricted = restricted if restricted is not None else ForbiddenSet()
        # successors must never reuse the uids of the boundary states
        self.counter = counter if counter is not None else UidCounter(max(start.uid, goal.uid) + 1)
        self.h_fn = h_fn if h_fn is not None else _greedy
        self.last_state: Optional[GridState] = None

        self.opened: Dict[int, GridState] = {}
        self.closed: Dict[int, GridState] = {}
        self._frontier = Frontier()
        self._open(start)

    @property
    def opened_count(self) -> int:
        return len(self.opened)

    @property
    def closed_count(self) -> int:
        return len(self.closed)

    def _open(self, state: GridState) -> None:
        self.opened[state.cells] = state
        self._frontier.push(state, state.cost + self.h_fn(state, self.goal))

    def _close(self, state: GridState) -> None:
        del self.opened[state.cells]
        self.closed[state.cells] = state

    def _expand(self, state: GridState) -> None:
        for ns in successors(state, self.restricted, self.counter):
            if ns.cells in self.closed or ns.cells in self.opened:
                continue
            self._open(ns)

    def solve(self, time_limit_s: Optional[float] = None, node_limit: Optional[int] = None) -> SearchResult:
        t0 = time.time()
        if self.last_state is not None:
            return SearchResult(FOUND, 0, time.time() - t0, self.get_path())
        if self.start.count() != self.goal.count():
            log.debug("token counts differ (%d vs %d), goal unreachable", self.start.count(), self.goal.count())
            return SearchResult(EXHAUSTED, 0, time.time() - t0)

        expanded = 0
        while len(self._frontier) > 0:
            best = self.opened[self._frontier.peek()]
            if best == self.goal:
                self.last_state = best
                path = self.get_path()
                log.debug("goal found: cost=%d expanded=%d opened=%d closed=%d",
                          best.cost, expanded, self.opened_count, self.closed_count)
                return SearchResult(FOUND, expanded, time.time() - t0, path)

            # budgets apply to expansions only, the best state stays in the frontier
            if time_limit_s is not None and (time.time() - t0) > time_limit_s:
                log.debug("time limit %.2fs hit after %d expansions", time_limit_s, expanded)
                return SearchResult(LIMIT, expanded, time.time() - t0)
            if node_limit is not None and expanded >= node_limit:
                log.debug("node limit %d hit", node_limit)
                return SearchResult(LIMIT, expanded, time.time() - t0)

            self._frontier.pop()
            self._expand(best)
            self._close(best)
            expanded += 1

        log.debug("frontier exhausted after %d expansions", expanded)
        return SearchResult(EXHAUSTED, expanded, time.time() - t0)

    def get_path(self) -> List[GridState]:
        """States from start to last_state, following parent uids."""
        if self.last_state is None:
            raise PathReconstructionError("Cannot build the path: goal has not been reached")

        by_uid = {s.uid: s for s in chain(self.opened.values(), self.closed.values())}
        cur = self.last_state
        path = [cur]
        while cur.parent_uid != 0:
            parent = by_uid.get(cur.parent_uid)
            if parent is None:
                raise PathReconstructionError(f"Cannot build the path: state with uid {cur.parent_uid} not found")
            if len(path) > len(by_uid):
                raise PathReconstructionError("Cannot build the path: parent links form a cycle")
            cur = parent
            path.append(cur)
        path.reverse()
        return path
