from __future__ import annotations
import argparse, csv, os, time
from typing import Dict, List
from multiprocessing import Pool, cpu_count
from tqdm import tqdm
import yaml

from hopgrid_core.levels.io import puzzle_ids_in
from hopgrid_core.levels.resolve import load_puzzle_by_id
from search.astar import AStar
from heuristics.selector import HEURISTICS, get_heuristic

FIELDS = ["puzzle_id", "heuristic", "status", "success", "nodes", "runtime", "solution_len"]


def _run_one(args_tuple) -> Dict[str, object]:
    puzzle_id, heur_name, time_limit, node_limit = args_tuple
    pz = load_puzzle_by_id(puzzle_id)
    engine = AStar(pz.start, pz.goal, pz.restricted, counter=pz.counter, h_fn=get_heuristic(heur_name))
    res = engine.solve(time_limit_s=time_limit, node_limit=node_limit)
    return {"puzzle_id": puzzle_id, "heuristic": heur_name, **res.as_row()}


def load_config(path: str) -> Dict[str, object]:
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def main():
    p = argparse.ArgumentParser(description="Batch A* runs → CSV (flags, parallel)")
    p.add_argument("--config", default="configs/search.yaml")
    p.add_argument("--list", default=None, help="file with one puzzle id per line (overrides config)")
    p.add_argument("--root_dir", default=None, help="folder holding puzzle subfolders (overrides config)")
    p.add_argument("--sources", nargs="*", default=None, help="subfolders of root_dir with .txt puzzle files")
    p.add_argument("--h", default=None, choices=HEURISTICS)
    p.add_argument("--out", default=None)
    p.add_argument("--time_limit", type=float, default=None)
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    args = p.parse_args()

    cfg = load_config(args.config)
    heur = args.h or cfg.get("heuristic", "greedy")
    out = args.out or cfg.get("out", "results/batch.csv")
    time_limit = args.time_limit if args.time_limit is not None else cfg.get("time_limit")
    node_limit = args.node_limit if args.node_limit is not None else cfg.get("node_limit")

    if args.list:
        with open(args.list, "r", encoding="utf-8") as f:
            puzzle_ids: List[str] = [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]
    else:
        puzzle_ids = list(cfg.get("puzzles") or [])
        root_dir = args.root_dir or cfg.get("root_dir")
        sources = args.sources if args.sources is not None else cfg.get("sources") or []
        if root_dir:
            puzzle_ids += puzzle_ids_in(root_dir, list(sources))
    if not puzzle_ids:
        raise ValueError("No puzzles given (use --list, --root_dir/--sources, or 'puzzles' / 'root_dir' in the config)")

    if os.path.dirname(out):
        os.makedirs(os.path.dirname(out), exist_ok=True)

    jobs = args.jobs or cpu_count()
    payload = [(pid, heur, time_limit, node_limit) for pid in puzzle_ids]

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc="Running A*", unit="puzzle")]
    else:
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc="Running A*", unit="puzzle"))

    with open(out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    print(f"done: {len(rows)} puzzles → {out}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()
