from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple
import os

from hopgrid_core.parser import parse_pattern_str
from hopgrid_core.state import GridState, ForbiddenSet, UidCounter

PUZZLE_SEPARATOR = "---"
COMMENT = ";"


@dataclass
class Puzzle:
    start: GridState
    goal: GridState
    restricted: ForbiddenSet
    counter: UidCounter  # the counter start/goal were drawn from, pass it on to AStar


@dataclass
class PuzzleRef:
    path: str
    index: int  # index of the puzzle inside the file (if there are multiple puzzles)


def _strip_comments(text: str) -> str:
    return "\n".join(line for line in text.splitlines() if not line.lstrip().startswith(COMMENT))


def _split_on_blank_lines(text: str) -> List[str]:
    blocks: List[str] = []
    cur: List[str] = []
    for line in text.splitlines():
        if line.strip() == "":
            if cur:
                blocks.append("\n".join(cur))
                cur = []
        else:
            cur.append(line.rstrip("\n"))
    if cur:
        blocks.append("\n".join(cur))
    return blocks


def split_puzzles(text: str) -> List[str]:
    """Splits a file into puzzle texts on lines consisting of '---'."""
    chunks: List[str] = []
    cur: List[str] = []
    for line in _strip_comments(text).splitlines():
        if line.strip() == PUZZLE_SEPARATOR:
            chunks.append("\n".join(cur))
            cur = []
        else:
            cur.append(line)
    chunks.append("\n".join(cur))
    return [c for c in chunks if c.strip() != ""]


def parse_puzzle_str(puzzle_str: str) -> Puzzle:
    """Parses one puzzle: start, goal and optional forbidden block.

    Blocks are 8 rows of 8 binary digits separated by blank lines.
    """
    blocks = _split_on_blank_lines(_strip_comments(puzzle_str))
    if len(blocks) not in (2, 3):
        raise ValueError(f"Expected 2 or 3 blocks (start, goal[, forbidden]), got {len(blocks)}")

    counter = UidCounter()
    start = GridState.from_cells(parse_pattern_str(blocks[0]), counter)
    goal = GridState.from_cells(parse_pattern_str(blocks[1]), counter)
    restricted = ForbiddenSet(parse_pattern_str(blocks[2])) if len(blocks) == 3 else ForbiddenSet()
    return Puzzle(start=start, goal=goal, restricted=restricted, counter=counter)


def iterate_puzzle_strings(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[PuzzleRef, str]]:
    """Iterate over all .txt in the given subfolders and return (puzzle reference, puzzle string)."""
    for rel in rel_dirs:
        abs_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(abs_dir):
            continue
        for fname in sorted(os.listdir(abs_dir)):
            if not fname.endswith(".txt"):
                continue
            fpath = os.path.join(abs_dir, fname)
            with open(fpath, "r", encoding="utf-8") as f:
                content = f.read()
            for i, chunk in enumerate(split_puzzles(content)):
                yield PuzzleRef(path=fpath, index=i), chunk


def puzzle_ids_in(root_dir: str, rel_dirs: List[str]) -> List[str]:
    """Ids ("path#idx") of every puzzle under the given subfolders."""
    return [f"{ref.path}#{ref.index}" for ref, _ in iterate_puzzle_strings(root_dir, rel_dirs)]
