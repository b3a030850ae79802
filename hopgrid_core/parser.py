from typing import List, Sequence
from .state import WIDTH, HEIGHT, set_bit

TOK_EMPTY = "0"
TOK_TOKEN = "1"


def parse_rows(rows: Sequence[str]) -> int:
    """Parses a row-major binary pattern into a bitset.

    Exactly HEIGHT rows of WIDTH characters, '1' for a token (or a forbidden
    cell), '0' for an empty cell. Row 0 is the top row and fills the lowest
    bits: idx = x + y*WIDTH.
    """
    rows = [row.strip() for row in rows]
    if len(rows) != HEIGHT:
        raise ValueError(f"Expected {HEIGHT} rows, got {len(rows)}")

    mask = 0
    for y, row in enumerate(rows):
        if len(row) != WIDTH:
            raise ValueError(f"Row {y} has length {len(row)}, expected {WIDTH}: {row!r}")
        for x, ch in enumerate(row):
            if ch == TOK_TOKEN:
                mask = set_bit(mask, x + y * WIDTH)
            elif ch != TOK_EMPTY:
                raise ValueError(f"Unexpected character {ch!r} at ({x}, {y})")
    return mask


def parse_pattern_str(pattern_str: str) -> int:
    """Same as parse_rows, for a multi-line string (blank lines are skipped)."""
    lines = [line for line in pattern_str.splitlines() if line.strip() != ""]
    return parse_rows(lines)


def format_rows(mask: int) -> List[str]:
    """Inverse of parse_rows."""
    return [
        "".join(TOK_TOKEN if (mask >> (x + y * WIDTH)) & 1 else TOK_EMPTY for x in range(WIDTH))
        for y in range(HEIGHT)
    ]
