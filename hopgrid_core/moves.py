from typing import List, Tuple
from .state import WIDTH, HEIGHT, GridState, ForbiddenSet, UidCounter, iter_bits, set_bit, clear_bit, xy_to_idx

# Direction order matters for reproducible frontier insertion: -x, +x, -y, +y
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _in_bounds(x: int, y: int) -> bool:
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def legal_moves(state: GridState, restricted: ForbiddenSet) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    """All (source, destination) pairs for one token move.

    For each direction:
      1) step: the neighbour cell is free and not restricted,
      2) jump: the neighbour is occupied, the cell behind it is free and not
         restricted. The jumped-over cell itself may be restricted.
    """
    moves = []
    for idx in iter_bits(state.cells):
        x, y = idx % WIDTH, idx // WIDTH
        for dx, dy in DIRECTIONS:
            x1, y1 = x + dx, y + dy
            if not _in_bounds(x1, y1):
                continue
            if not state.test(x1, y1):
                if not restricted.test(x1, y1):
                    moves.append(((x, y), (x1, y1)))
                continue
            x2, y2 = x + 2 * dx, y + 2 * dy
            if _in_bounds(x2, y2) and not state.test(x2, y2) and not restricted.test(x2, y2):
                moves.append(((x, y), (x2, y2)))
    return moves


def successors(state: GridState, restricted: ForbiddenSet, counter: UidCounter) -> List[GridState]:
    """Every state one move away, each with a fresh uid, cost+1 and parent=state."""
    succs: List[GridState] = []
    for (x0, y0), (x1, y1) in legal_moves(state, restricted):
        cells = clear_bit(state.cells, xy_to_idx(x0, y0))
        cells = set_bit(cells, xy_to_idx(x1, y1))
        succs.append(state.child(cells, counter))
    return succs
