# --- file: hopgrid_core/levels/resolve.py
from __future__ import annotations
from typing import Tuple
import os

from .io import Puzzle, parse_puzzle_str, split_puzzles

EXAMPLES_DIR = os.path.join(os.path.dirname(__file__), "examples")
DEFAULT_PUZZLE = os.path.join(EXAMPLES_DIR, "corner_swap.txt")


def parse_puzzle_id(puzzle_id: str) -> Tuple[str, int]:
    """Parses a string of the form "path/to/file.txt#3" into (path, index)."""
    if "#" not in puzzle_id:
        return puzzle_id, 0
    path, idx = puzzle_id.rsplit("#", 1)
    try:
        k = int(idx)
    except ValueError:
        k = 0
    return path, k


def load_puzzle_by_id(puzzle_id: str) -> Puzzle:
    """Loads a SPECIFIC puzzle file#idx even if the file contains several puzzles."""
    path, wanted = parse_puzzle_id(puzzle_id)
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    chunks = split_puzzles(content)
    if not chunks:
        raise ValueError(f"No puzzles found in {path}")
    if wanted < 0 or wanted >= len(chunks):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(chunks)})")
    return parse_puzzle_str(chunks[wanted])
