from typing import List, Tuple

from .errors import IllegalMove
from .state import Direction, State, goal_rc, opposite

# Fixed expansion order for every search strategy.
DIRECTIONS: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)


def can_move(state: State, d: Direction) -> bool:
    """True if the blank stays on the board after one step in direction d."""
    r, c = state.blank_rc()
    dr, dc = d.delta
    r += dr
    c += dc
    return 0 <= r < state.size and 0 <= c < state.size


def _tile_distance(tile: int, idx: int, size: int) -> int:
    gr, gc = goal_rc(tile, size)
    return abs(idx // size - gr) + abs(idx % size - gc)


def move(state: State, d: Direction) -> State:
    """Slides the blank one step in direction d and returns the successor.

    The successor remembers opposite(d) as its last move, so the path can be
    read back from goal to root. Only the swapped tile changes position, so the
    heuristic is updated from the parent's value instead of recomputed.
    """
    if not can_move(state, d):
        raise IllegalMove(f"cannot move {d.name.lower()} from blank at {state.blank_rc()}")

    size = state.size
    dr, dc = d.delta
    old = state.blank
    new = old + dr * size + dc
    tile = state.tiles[new]

    tiles = list(state.tiles)
    tiles[old], tiles[new] = tile, tiles[old]

    heuristic = state.heuristic - _tile_distance(tile, new, size) + _tile_distance(tile, old, size)
    return State(
        size=size,
        tiles=tuple(tiles),
        blank=new,
        last_move=opposite(d),
        path_cost=state.path_cost + 1,
        heuristic=heuristic,
    )


def successors(state: State) -> List[Tuple[Direction, State]]:
    """All legal successors except the one that walks straight back to the parent."""
    out: List[Tuple[Direction, State]] = []
    for d in DIRECTIONS:
        if d == state.last_move or not can_move(state, d):
            continue
        out.append((d, move(state, d)))
    return out


def apply_moves(state: State, moves: str) -> State:
    """Replays a solution string ('u', 'r', 'd', 'l') from state."""
    cur = state
    for ch in moves:
        try:
            d = Direction(ch)
        except ValueError:
            raise ValueError(f"unknown move character: {ch!r}") from None
        cur = move(cur, d)
    return cur


def replay(state: State, moves: str) -> List[State]:
    """Every state visited by the solution string, start included."""
    path = [state]
    for ch in moves:
        path.append(apply_moves(path[-1], ch))
    return path
