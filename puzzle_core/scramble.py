import random
from typing import Optional

from .moves import DIRECTIONS, can_move, move
from .state import Direction, State, goal_tiles


def goal_state(size: int) -> State:
    return State.from_tiles(goal_tiles(size), size)


def scramble(size: int, depth: int, seed: Optional[int] = None) -> State:
    """Random walk of `depth` blank moves from the goal, never undoing the previous step.

    Every instance reached this way is solvable in at most `depth` moves.
    The returned state is a fresh root (no path history).
    """
    rng = random.Random(seed)
    s = goal_state(size)
    for _ in range(depth):
        cand = [d for d in DIRECTIONS if d != s.last_move and can_move(s, d)]
        d: Direction = rng.choice(cand)
        s = move(s, d)
    return State.from_tiles(s.tiles, size)
