from __future__ import annotations
import argparse, csv, os, time
from typing import List, Dict
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from puzzle_core.errors import PuzzleError
from puzzle_core.parser import parse_grid_file
from heuristics.selector import HEURISTICS
from search.solver import ALGORITHMS, solve

FIELDS = ["puzzle", "algo", "heuristic", "success", "nodes", "runtime", "solution_len", "error"]


def _run_one(args_tuple) -> Dict[str, object]:
    path, algo, heur_name, time_limit, node_limit = args_tuple
    row: Dict[str, object] = {"puzzle": path, "algo": algo, "heuristic": heur_name}
    try:
        s = parse_grid_file(path)
        res = solve(s, algo=algo, heuristic=heur_name, time_limit_s=time_limit, node_limit=node_limit, workers=2)
    except (PuzzleError, OSError) as e:
        row.update({"success": False, "nodes": 0, "runtime": 0.0, "solution_len": -1, "error": str(e)})
        return row
    row.update({
        "success": bool(res.get("success", False)),
        "nodes": int(res.get("nodes", 0)),
        "runtime": float(res.get("runtime", 0.0)),
        "solution_len": int(res.get("solution_len", -1)),
        "error": res.get("reason", ""),
    })
    return row


def read_list(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]


def run_batch(paths: List[str], algo: str, heur: str, time_limit: float, node_limit: int, jobs: int) -> List[Dict[str, object]]:
    payload = [(p, algo, heur, time_limit, node_limit) for p in paths]
    if jobs == 1:
        return [_run_one(t) for t in tqdm(payload, desc=f"Running {algo}", unit="puzzle")]
    with Pool(processes=jobs) as pool:
        return list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc=f"Running {algo}", unit="puzzle"))


def main():
    p = argparse.ArgumentParser(description="Batch solver runs → CSV (flags, parallel)")
    p.add_argument("--list", required=True, help="text file with one puzzle path per line")
    p.add_argument("--algo", default="astar", choices=ALGORITHMS)
    p.add_argument("--h", default="manhattan", choices=HEURISTICS)
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--time_limit", type=float, default=10.0)
    p.add_argument("--node_limit", type=int, default=200000)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    args = p.parse_args()

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    paths = read_list(args.list)
    jobs = args.jobs or cpu_count()

    started = time.time()
    rows = run_batch(paths, args.algo, args.h, args.time_limit, args.node_limit, jobs)

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    solved = sum(1 for r in rows if r["success"])
    print(f"done: {solved}/{len(rows)} solved → {args.out}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()
