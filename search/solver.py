from __future__ import annotations
from typing import Optional

from puzzle_core.errors import UnsolvablePuzzle
from puzzle_core.solvability import is_solvable
from puzzle_core.state import State
from heuristics.selector import get_heuristic
from .astar import Result, astar
from .bfs import bfs
from .parallel_astar import parallel_astar

ALGORITHMS = ("bfs", "astar", "parallel")


def solve(
    start: State,
    algo: str = "astar",
    heuristic: str = "manhattan",
    check_solvable: bool = True,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
    workers: Optional[int] = None,
) -> Result:
    """Runs one search strategy on start. Unsolvable boards are rejected up front,
    since none of the strategies can tell an unreachable goal from a far one."""
    if check_solvable and not is_solvable(start):
        raise UnsolvablePuzzle("puzzle cannot reach the goal configuration (parity mismatch)")

    algo = algo.lower()
    if algo == "bfs":
        return bfs(start, time_limit_s=time_limit_s, node_limit=node_limit)
    h = get_heuristic(heuristic)
    if algo == "astar":
        return astar(start, h, time_limit_s=time_limit_s, node_limit=node_limit)
    if algo == "parallel":
        return parallel_astar(start, h, workers=workers, time_limit_s=time_limit_s, node_limit=node_limit)
    raise ValueError(f"unknown algorithm: {algo}")
