from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence, Tuple

# Grid dimensions are fixed for the whole package
WIDTH = 8
HEIGHT = 8

__all__ = [
    "WIDTH",
    "HEIGHT",
    "UidCounter",
    "GridState",
    "ForbiddenSet",
    "bit",
    "has_bit",
    "set_bit",
    "clear_bit",
    "iter_bits",
    "xy_to_idx",
    "idx_to_xy",
    "manhattan",
]

def bit(idx: int) -> int:
    return 1 << idx

def has_bit(mask: int, idx: int) -> bool:
    return (mask >> idx) & 1 == 1

def set_bit(mask: int, idx: int) -> int:
    return mask | bit(idx)

def clear_bit(mask: int, idx: int) -> int:
    return mask & ~bit(idx)

def iter_bits(mask: int) -> Iterable[int]:
    """Indices of set bits, ascending (row-major for grid patterns)."""
    idx = 0
    m = mask
    while m:
        if m & 1:
            yield idx
        m >>= 1
        idx += 1

def xy_to_idx(x: int, y: int) -> int:
    return x + y * WIDTH

def idx_to_xy(idx: int) -> Tuple[int, int]:
    return (idx % WIDTH, idx // WIDTH)

def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class UidCounter:
    """Hands out state identities 1, 2, 3, ...

    0 is reserved for "no parent". One counter must serve every state of a
    single search, so that parent links stay unambiguous.
    """
    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("uid 0 is reserved for the root")
        self._next = start

    def next(self) -> int:
        uid = self._next
        self._next += 1
        return uid

    @property
    def peek(self) -> int:
        return self._next


@dataclass(frozen=True, slots=True)
class GridState:
    """
    Token occupancy of the 8x8 grid plus search bookkeeping.

    cells: bitset, bit (x + y*WIDTH) set means a token sits on (x, y).
    Row y=0 is the topmost row of the literal patterns.
    Equality and hash look at `cells` only, uid/parent_uid/cost are ignored.
    """

    cells: int # bitset
    uid: int = field(default=0, compare=False)
    parent_uid: int = field(default=0, compare=False)
    cost: int = field(default=0, compare=False)

    def __hash__(self) -> int:
        return self.cells


    # ---- construction
    @classmethod
    def from_cells(cls, cells: int, counter: UidCounter) -> "GridState":
        return cls(cells=cells, uid=counter.next())


    @classmethod
    def from_rows(cls, rows: Sequence[str], counter: UidCounter) -> "GridState":
        from .parser import parse_rows
        return cls.from_cells(parse_rows(rows), counter)


    def child(self, cells: int, counter: UidCounter) -> "GridState":
        """New state generated from this one by a single move."""
        return GridState(cells=cells, uid=counter.next(), parent_uid=self.uid, cost=self.cost + 1)


    # ---- occupancy
    def test(self, x: int, y: int) -> bool:
        return has_bit(self.cells, xy_to_idx(x, y))


    def set(self, x: int, y: int) -> "GridState":
        return replace(self, cells=set_bit(self.cells, xy_to_idx(x, y)))


    def reset(self, x: int, y: int) -> "GridState":
        return replace(self, cells=clear_bit(self.cells, xy_to_idx(x, y)))


    def occupied(self) -> Iterable[Tuple[int, int]]:
        """Occupied cells in row-major order."""
        for idx in iter_bits(self.cells):
            yield idx_to_xy(idx)


    def count(self) -> int:
        return bin(self.cells).count("1")


    # ---- heuristic support
    def nearest_occupied(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        """Nearest token to (x, y); the first one met in row-major order wins ties."""
        return _nearest(self.cells, (x, y))


    def distance(self, other: "GridState") -> int:
        """Greedy nearest-match estimate of the moves from self to other.

        Tokens are indistinguishable, so every token of self (row-major) is
        paired with the nearest unmatched token of other. Not symmetric.
        """
        return greedy_match_distance(self.cells, other.cells)


def _nearest(mask: int, p: Tuple[int, int]) -> Optional[Tuple[int, int]]:
    best: Optional[Tuple[int, int]] = None
    best_d = WIDTH + HEIGHT
    for idx in iter_bits(mask):
        q = idx_to_xy(idx)
        d = manhattan(p, q)
        if d < best_d:
            best_d = d
            best = q
    return best


def greedy_match_distance(this_cells: int, other_cells: int) -> int:
    total = 0
    other = other_cells
    for idx in iter_bits(this_cells):
        p = idx_to_xy(idx)
        q = _nearest(other, p)
        if q is None:
            # other has fewer tokens, nothing left to pair with
            break
        other = clear_bit(other, xy_to_idx(*q))
        total += manhattan(p, q)
    return total


@dataclass(frozen=True, slots=True)
class ForbiddenSet:
    """Cells no token may move onto. Built once, never mutated."""

    cells: int = 0 # bitset

    @classmethod
    def from_patterns(cls, *patterns: Sequence[str]) -> "ForbiddenSet":
        """Union of one or more row patterns."""
        from .parser import parse_rows
        cells = 0
        for rows in patterns:
            cells |= parse_rows(rows)
        return cls(cells=cells)


    def test(self, x: int, y: int) -> bool:
        return has_bit(self.cells, xy_to_idx(x, y))
