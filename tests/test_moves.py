from hopgrid_core.state import GridState, ForbiddenSet, UidCounter
from hopgrid_core.moves import legal_moves, successors

PAIR = [
    "00000000",
    "00000000",
    "00000000",
    "00110000",
    "00000000",
    "00000000",
    "00000000",
    "00000000",
]


def _rows_with(*cells):
    rows = [list("00000000") for _ in range(8)]
    for x, y in cells:
        rows[y][x] = "1"
    return ["".join(r) for r in rows]


def test_corner_token_has_two_steps():
    s = GridState.from_rows(_rows_with((0, 0)), UidCounter())
    moves = legal_moves(s, ForbiddenSet())
    assert moves == [((0, 0), (1, 0)), ((0, 0), (0, 1))]


def test_pair_steps_and_jumps():
    s = GridState.from_rows(PAIR, UidCounter())
    moves = set(legal_moves(s, ForbiddenSet()))
    # (2,3) jumps over (3,3) to (4,3), and (3,3) jumps over (2,3) to (1,3)
    assert ((2, 3), (4, 3)) in moves
    assert ((3, 3), (1, 3)) in moves
    # no step onto an occupied cell
    assert ((2, 3), (3, 3)) not in moves
    assert len(moves) == 8


def test_restricted_step_rejected():
    s = GridState.from_rows(_rows_with((0, 0)), UidCounter())
    fs = ForbiddenSet.from_patterns(_rows_with((1, 0)))
    assert legal_moves(s, fs) == [((0, 0), (0, 1))]


def test_jump_rejected_when_destination_restricted():
    s = GridState.from_rows(PAIR, UidCounter())
    fs = ForbiddenSet.from_patterns(_rows_with((4, 3)))
    assert ((2, 3), (4, 3)) not in legal_moves(s, fs)


def test_jump_allowed_over_restricted_cell():
    s = GridState.from_rows(PAIR, UidCounter())
    # the jumped-over cell is occupied and restricted, the landing cell is free
    fs = ForbiddenSet.from_patterns(_rows_with((3, 3)))
    assert ((2, 3), (4, 3)) in legal_moves(s, fs)


def test_no_jump_without_intermediate_token():
    s = GridState.from_rows(_rows_with((3, 3)), UidCounter())
    dests = {dst for _, dst in legal_moves(s, ForbiddenSet())}
    assert dests == {(2, 3), (4, 3), (3, 2), (3, 4)}


def test_jump_blocked_by_board_edge_or_token():
    s = GridState.from_rows(_rows_with((0, 0), (1, 0), (2, 0)), UidCounter())
    moves = legal_moves(s, ForbiddenSet())
    # jumps may not land on a token, the middle token jumps right over (2,0)
    assert ((0, 0), (2, 0)) not in moves
    assert ((2, 0), (0, 0)) not in moves
    assert ((1, 0), (3, 0)) in moves
    assert ((2, 0), (3, 0)) in moves


def test_successors_bookkeeping():
    counter = UidCounter()
    s = GridState.from_rows(PAIR, counter)
    succs = successors(s, ForbiddenSet(), counter)
    assert len(succs) == 8
    assert all(ns.parent_uid == s.uid for ns in succs)
    assert all(ns.cost == s.cost + 1 for ns in succs)
    assert len({ns.uid for ns in succs}) == 8
    assert all(ns.count() == s.count() for ns in succs)
    assert all(ns != s for ns in succs)
