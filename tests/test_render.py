"""Tests for the render module."""

from hopgrid_core.state import GridState, ForbiddenSet, UidCounter
from hopgrid_core.render import render_ascii, format_state, format_stats
from search.astar import AStar

ROWS = [
    "10000000",
    "00000000",
    "00000000",
    "00000000",
    "00000000",
    "00000000",
    "00000000",
    "00000001",
]

FORBIDDEN = [
    "01000000",
    "00000000",
    "00000000",
    "00000000",
    "00000000",
    "00000000",
    "00000000",
    "00000000",
]


def test_render_basic_grid():
    s = GridState.from_rows(ROWS, UidCounter())
    lines = render_ascii(s).splitlines()
    assert len(lines) == 8
    assert lines[0] == "o......."
    assert lines[7] == ".......o"


def test_render_with_forbidden():
    s = GridState.from_rows(ROWS, UidCounter())
    fs = ForbiddenSet.from_patterns(FORBIDDEN)
    assert render_ascii(s, fs).splitlines()[0] == "o#......"


def test_format_state_and_stats():
    counter = UidCounter()
    s = GridState.from_rows(ROWS, counter)
    txt = format_state(s)
    assert txt.splitlines()[0] == "uid=1 parent=0 cost=0"

    engine = AStar(s, s, counter=counter)
    assert format_stats(engine) == "opened=1 closed=0"
