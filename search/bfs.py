from __future__ import annotations
from collections import deque
from typing import Deque, Optional
import time

from puzzle_core.state import State
from puzzle_core.moves import successors
from .arena import NodeArena
from .astar import Result
from .transposition import Transposition


def bfs(
    start: State,
    trans: Optional[Transposition] = None,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
) -> Result:
    """Breadth-first search; the first complete state dequeued is a shortest solution.

    Only the immediate back-edge is pruned, so configurations can be revisited.
    Pass a Transposition to drop every configuration seen before.
    """
    t0 = time.monotonic()
    arena = NodeArena()
    q: Deque[int] = deque([arena.add(start)])
    if trans is not None:
        trans.seen_better(start, 0)

    expanded = 0
    found: Optional[int] = None
    reason = "exhausted"

    while q:
        if time_limit_s is not None and (time.monotonic() - t0) > time_limit_s:
            reason = "time_limit"
            break
        node = q.popleft()
        s = arena.states[node]
        if s.is_complete():
            found = node
            break
        if node_limit is not None and expanded >= node_limit:
            reason = "node_limit"
            break
        expanded += 1

        for _, ns in successors(s):
            if trans is not None and trans.seen_better(ns, ns.path_cost):
                continue
            q.append(arena.add(ns, node))

    runtime = time.monotonic() - t0
    if found is None:
        return {"success": False, "nodes": expanded, "runtime": runtime, "reason": reason}
    moves = arena.moves(found)
    return {
        "success": True,
        "nodes": expanded,
        "runtime": runtime,
        "solution_len": len(moves),
        "path_cost": arena.states[found].path_cost,
        "moves": moves,
    }
