import pytest
from hopgrid_core.state import GridState
from heuristics.classic import h_zero, h_greedy, h_manhattan_hungarian
from heuristics.selector import get_heuristic


def test_hungarian_never_above_greedy():
    a = GridState(0b1100)  # (2,0), (3,0)
    b = GridState(0b1001)  # (0,0), (3,0)
    assert h_greedy(a, b) == 4
    assert h_manhattan_hungarian(a, b) == 2
    assert h_manhattan_hungarian(a, a) == 0
    assert h_zero(a, b) == 0


def test_hungarian_empty():
    assert h_manhattan_hungarian(GridState(0), GridState(0b1)) == 0


def test_selector():
    assert get_heuristic("greedy") is h_greedy
    assert get_heuristic("Hungarian") is h_manhattan_hungarian
    assert get_heuristic("zero") is h_zero
    with pytest.raises(ValueError):
        get_heuristic("euclid")
