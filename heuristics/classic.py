from __future__ import annotations
from typing import List, Tuple

import numpy as np
from scipy.optimize import linear_sum_assignment
from hopgrid_core.state import GridState, idx_to_xy, iter_bits, manhattan


# ---- helpers

def _positions(mask: int) -> List[Tuple[int, int]]:
    return [idx_to_xy(i) for i in iter_bits(mask)]


# ---- classical heuristics

def h_zero(state: GridState, goal: GridState) -> int:
    return 0


def h_greedy(state: GridState, goal: GridState) -> int:
    """Greedy nearest-token matching, see GridState.distance."""
    return state.distance(goal)


def h_manhattan_hungarian(state: GridState, goal: GridState) -> int:
    """Cost = optimal matching of tokens → goal cells by Manhattan distance.
    Forbidden cells are not considered. Surplus tokens on either side are left unmatched."""
    tokens = _positions(state.cells)
    targets = _positions(goal.cells)
    if not tokens or not targets:
        return 0

    C = np.empty((len(tokens), len(targets)), dtype=np.int32)
    for i, p in enumerate(tokens):
        for j, q in enumerate(targets):
            C[i, j] = manhattan(p, q)
    r, c = linear_sum_assignment(C)
    return int(C[r, c].sum())
