from typing import Optional
from .state import WIDTH, HEIGHT, GridState, ForbiddenSet

GLYPH_TOKEN = "o"
GLYPH_FORBIDDEN = "#"
GLYPH_EMPTY = "."


def render_ascii(state: GridState, restricted: Optional[ForbiddenSet] = None) -> str:
    """ASCII visualization of the grid, top row first."""
    out_lines = []
    for y in range(HEIGHT):
        row_chars = []
        for x in range(WIDTH):
            if state.test(x, y):
                row_chars.append(GLYPH_TOKEN)
            elif restricted is not None and restricted.test(x, y):
                row_chars.append(GLYPH_FORBIDDEN)
            else:
                row_chars.append(GLYPH_EMPTY)
        out_lines.append(''.join(row_chars))
    return "\n".join(out_lines)


def format_state(state: GridState) -> str:
    return (
        f"uid={state.uid} parent={state.parent_uid} cost={state.cost}\n"
        f"{render_ascii(state)}"
    )


def format_stats(engine) -> str:
    """Open/closed sizes of an AStar engine."""
    return f"opened={engine.opened_count} closed={engine.closed_count}"
