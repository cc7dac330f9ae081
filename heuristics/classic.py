from __future__ import annotations
from bisect import bisect_left
from typing import List, Tuple

import numpy as np
from puzzle_core.state import BLANK, State, goal_table, manhattan_distance


# ---- helpers

def _line_conflicts(goal_positions: List[int]) -> int:
    """Fewest tiles that must leave the line so the rest are in goal order.

    = len - longest increasing subsequence. Counting reversed pairs instead
    overestimates when three or more tiles are mutually reversed.
    """
    lis: List[int] = []
    for g in goal_positions:
        k = bisect_left(lis, g)
        if k == len(lis):
            lis.append(g)
        else:
            lis[k] = g
    return len(goal_positions) - len(lis)


def _grid(state: State) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    grid = np.asarray(state.tiles, dtype=np.int64).reshape(state.size, state.size)
    goal_rows, goal_cols = goal_table(state.size)
    return grid, goal_rows[grid], goal_cols[grid]


# ---- classical heuristics

def h_zero(state: State) -> int:
    return 0


def h_manhattan(state: State) -> int:
    """Cached on the state at construction; see puzzle_core.state.manhattan_distance."""
    return state.heuristic


def h_manhattan_full(state: State) -> int:
    """Same value as h_manhattan, recomputed from the tiles."""
    return manhattan_distance(state.tiles, state.size)


def h_linear_conflict(state: State) -> int:
    """Manhattan + 2 for every tile that has to step out of its goal row (or column)
    to let a reversed neighbour pass. Still a lower bound."""
    grid, goal_r, goal_c = _grid(state)
    extra = 0
    for r in range(state.size):
        in_row = (grid[r] != BLANK) & (goal_r[r] == r)
        extra += _line_conflicts(goal_c[r][in_row].tolist())
    for c in range(state.size):
        in_col = (grid[:, c] != BLANK) & (goal_c[:, c] == c)
        extra += _line_conflicts(goal_r[:, c][in_col].tolist())
    return state.heuristic + 2 * extra
