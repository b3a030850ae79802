from __future__ import annotations
from typing import Callable

from hopgrid_core.state import GridState
from heuristics.classic import h_zero, h_greedy, h_manhattan_hungarian

Heuristic = Callable[[GridState, GridState], int]

HEURISTICS = ("greedy", "hungarian", "zero")


def get_heuristic(name: str) -> Heuristic:
    name = name.lower()
    if name == "greedy":
        return h_greedy
    if name == "hungarian":
        return h_manhattan_hungarian
    if name == "zero":
        return h_zero
    raise ValueError(f"unknown heuristic: {name}")
