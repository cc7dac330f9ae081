from __future__ import annotations
from typing import Callable, Dict, Optional, Set, Tuple
import time

from puzzle_core.state import State
from puzzle_core.moves import successors
from heuristics.classic import h_manhattan
from .arena import NodeArena
from .priority_queue import PriorityQueue
from .transposition import Transposition

Result = Dict[str, object]


def priority(s: State, h_fn: Callable[[State], int]) -> Tuple[int, int]:
    """Ascending f = g + h; among equal f the longer path (larger g) comes first."""
    return (s.path_cost + h_fn(s), -s.path_cost)


def astar(
    start: State,
    h_fn: Callable[[State], int] = h_manhattan,
    trans: Optional[Transposition] = None,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
) -> Result:
    """A* over blank moves with a closed set and best-known g per configuration.

    A successor is pushed only when its g beats every g recorded for the same
    configuration; older, more expensive copies stay in the heap and are
    dropped when popped (lazy decrease-key). `trans` must be fresh for this call.
    """
    t0 = time.monotonic()
    if trans is None:
        trans = Transposition()
    arena = NodeArena()
    openq = PriorityQueue()
    closed: Set[State] = set()

    trans.seen_better(start, 0)
    openq.push(priority(start, h_fn), arena.add(start))

    expanded = 0
    found: Optional[int] = None
    reason = "exhausted"

    while len(openq) > 0:
        if time_limit_s is not None and (time.monotonic() - t0) > time_limit_s:
            reason = "time_limit"
            break
        node: int = openq.pop()
        s = arena.states[node]
        if s in closed or s.path_cost > trans.best(s):
            continue
        if s.is_complete():
            found = node
            break
        if node_limit is not None and expanded >= node_limit:
            reason = "node_limit"
            break
        closed.add(s)
        expanded += 1

        for _, ns in successors(s):
            if ns in closed:
                continue
            if trans.seen_better(ns, ns.path_cost):
                continue
            openq.push(priority(ns, h_fn), arena.add(ns, node))

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
