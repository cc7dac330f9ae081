from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional
import os
import threading
import time

from puzzle_core.state import Direction, State
from puzzle_core.moves import DIRECTIONS, can_move, move
from heuristics.classic import h_manhattan
from .arena import NodeArena
from .astar import Result, priority
from .priority_queue import ConcurrentPriorityQueue


def default_workers() -> int:
    return (os.cpu_count() or 1) * 2


def parallel_astar(
    start: State,
    h_fn: Callable[[State], int] = h_manhattan,
    workers: Optional[int] = None,
    max_pending: Optional[int] = None,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
) -> Result:
    """Best-effort A* with successor generation offloaded to a thread pool.

    The main loop pops the best entry and hands each direction to a worker,
    which checks legality, builds the successor and pushes it straight into
    the shared frontier. There is no closed set: states can be expanded more
    than once and the first solution found is not guaranteed to be shortest.
    At most `max_pending` direction tasks are in flight at any time.
    """
    t0 = time.monotonic()
    workers = workers or default_workers()
    max_pending = max_pending or workers * 4
    frontier = ConcurrentPriorityQueue()
    arena = NodeArena()  # touched by the main loop only
    slots = threading.BoundedSemaphore(max_pending)
    errors: List[BaseException] = []

    def expand(s: State, d: Direction, parent: int) -> None:
        try:
            if d == s.last_move or not can_move(s, d):
                return
            ns = move(s, d)
            frontier.push(priority(ns, h_fn), (ns, parent))
        except Exception as e:
            # recorded before task_done() so the main loop sees it when it wakes
            errors.append(e)
            raise
        finally:
            slots.release()
            frontier.task_done()

    frontier.push(priority(start, h_fn), (start, None))

    expanded = 0
    found: Optional[int] = None
    reason = "exhausted"

    pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="expand")
    try:
        while True:
            if errors:
                raise errors[0]
            remaining: Optional[float] = None
            if time_limit_s is not None:
                remaining = time_limit_s - (time.monotonic() - t0)
                if remaining <= 0:
                    reason = "time_limit"
                    break
            item = frontier.pop(timeout=remaining)
            if item is None:
                if errors:
                    raise errors[0]
                if time_limit_s is not None and (time.monotonic() - t0) > time_limit_s:
                    reason = "time_limit"
                break
            s, parent = item
            node = arena.add(s, parent)
            if s.is_complete():
                found = node
                break
            if node_limit is not None and expanded >= node_limit:
                reason = "node_limit"
                break
            expanded += 1

            for d in DIRECTIONS:
                slots.acquire()
                frontier.task_started()
                pool.submit(expand, s, d, node)
    finally:
        pool.shutdown(wait=True, cancel_futures=True)

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
