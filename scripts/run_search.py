from __future__ import annotations
import argparse

from hopgrid_core.levels.resolve import DEFAULT_PUZZLE, load_puzzle_by_id
from hopgrid_core.render import render_ascii, format_stats
from search.astar import AStar
from heuristics.selector import HEURISTICS, get_heuristic


def main():
    p = argparse.ArgumentParser()
    p.add_argument(
        "puzzle_id",
        nargs="?",
        default=DEFAULT_PUZZLE,
        help="Puzzle id like 'path/to/puzzles.txt#idx'.",
    )
    p.add_argument("--h", type=str, default="greedy", choices=HEURISTICS, help="heuristic")
    p.add_argument("--time_limit", type=float, default=None)
    p.add_argument("--node_limit", type=int, default=None)
    args = p.parse_args()

    pz = load_puzzle_by_id(args.puzzle_id)
    print(f"start:\n{render_ascii(pz.start, pz.restricted)}\n")
    print(f"goal:\n{render_ascii(pz.goal, pz.restricted)}\n")
    print("distance (before start):", pz.start.distance(pz.goal))

    engine = AStar(pz.start, pz.goal, pz.restricted, counter=pz.counter, h_fn=get_heuristic(args.h))
    res = engine.solve(time_limit_s=args.time_limit, node_limit=args.node_limit)
    print("Result:", res.as_row())
    print(format_stats(engine))
    if res.success:
        for i, st in enumerate(res.path):
            print(f"\n-- step {i} --\n{render_ascii(st, pz.restricted)}")

if __name__ == "__main__":
    main()
