from __future__ import annotations
import argparse
import sys
import time
from typing import List, Optional

from puzzle_core.errors import PuzzleError
from puzzle_core.io import write_solution
from puzzle_core.moves import replay
from puzzle_core.parser import parse_grid_file
from puzzle_core.render import render_ascii
from heuristics.selector import HEURISTICS
from search.solver import ALGORITHMS, solve

"""
Solve one puzzle file and write the move string plus elapsed seconds.

Usage:
  python -m scripts.solve.run_search input.txt output.txt --algo astar --h manhattan
"""

# Hard wall-clock budget for a single run (seconds).
DEFAULT_TIME_LIMIT = 30 * 60


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Sliding-tile puzzle solver")
    p.add_argument("input", help="puzzle grid file")
    p.add_argument("output", help="where to write the solution")
    p.add_argument("--algo", default="astar", choices=ALGORITHMS)
    p.add_argument("--h", default="manhattan", choices=HEURISTICS, help="heuristic (ignored by bfs)")
    p.add_argument("--time_limit", type=float, default=DEFAULT_TIME_LIMIT)
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--workers", type=int, default=None, help="threads for --algo parallel (0/None→2×cpu)")
    p.add_argument("--no_check", action="store_true", help="skip the solvability pre-check")
    p.add_argument("--show", action="store_true", help="print every board along the solution")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        t0 = time.time()
        s = parse_grid_file(args.input)
        res = solve(
            s,
            algo=args.algo,
            heuristic=args.h,
            check_solvable=not args.no_check,
            time_limit_s=args.time_limit,
            node_limit=args.node_limit,
            workers=args.workers or None,
        )
        elapsed = time.time() - t0
        print("Result:", {k: v for k, v in res.items() if k != "moves"})
        if not res.get("success"):
            print(f"Error: no solution found ({res.get('reason')})", file=sys.stderr)
            return 1
        moves: str = res["moves"]  # type: ignore
        write_solution(args.output, moves, elapsed)
    except (PuzzleError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.show:
        for i, st in enumerate(replay(s, moves)):
            print(f"\n-- step {i} --\n{render_ascii(st)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
