from __future__ import annotations
import heapq
from typing import List, Tuple

from hopgrid_core.state import GridState


class Frontier:
    """Open-set ordering for AStar.

    Holds (f, seq, pattern) entries; the pattern is the key of AStar.opened.
    Equal f values leave in the order they were pushed, which makes the
    search reproducible.
    """
    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, int]] = []
        self._seq = 0

    def push(self, state: GridState, f: int) -> None:
        self._seq += 1
        heapq.heappush(self._heap, (f, self._seq, state.cells))

    def peek(self) -> int:
        """Pattern of the best entry, left in place."""
        return self._heap[0][2]

    def pop(self) -> int:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)
