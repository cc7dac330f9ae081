from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple

import numpy as np

__all__ = [
    "BLANK",
    "Direction",
    "State",
    "opposite",
    "goal_tiles",
    "goal_table",
    "goal_rc",
    "manhattan_distance",
]

BLANK = 0


class Direction(Enum):
    """Blank moves. The value is the character written to the solution string."""

    NORTH = "u"
    EAST = "r"
    SOUTH = "d"
    WEST = "l"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}

_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


def opposite(d: Direction) -> Direction:
    return _OPPOSITE[d]


# ---- goal layout

@lru_cache(maxsize=None)
def goal_tiles(size: int) -> Tuple[int, ...]:
    """1..N²-1 in row-major order, blank last."""
    return tuple(range(1, size * size)) + (BLANK,)


@lru_cache(maxsize=None)
def goal_table(size: int) -> Tuple[np.ndarray, np.ndarray]:
    """Goal row and goal column for every label, indexed by label (0 = blank)."""
    labels = np.arange(size * size)
    rows = (labels - 1) // size
    cols = (labels - 1) % size
    rows[BLANK] = size - 1
    cols[BLANK] = size - 1
    return rows, cols


def goal_rc(tile: int, size: int) -> Tuple[int, int]:
    if tile == BLANK:
        return size - 1, size - 1
    return divmod(tile - 1, size)


def manhattan_distance(tiles: Tuple[int, ...], size: int) -> int:
    """Sum of per-tile Manhattan distances to the goal. The blank is not counted."""
    t = np.asarray(tiles, dtype=np.int64)
    goal_rows, goal_cols = goal_table(size)
    cells = np.arange(size * size)
    dist = np.abs(cells // size - goal_rows[t]) + np.abs(cells % size - goal_cols[t])
    dist[t == BLANK] = 0
    return int(dist.sum())


@dataclass(frozen=True, slots=True, eq=False)
class State:
    """
    Immutable configuration of an N×N sliding-tile board.

    tiles are stored row-major with 0 for the blank; cell indexing: idx = r*size + c.
    last_move is the direction leading back to the parent (None for the root).
    Equality looks at the grid only, never at the path that produced it.
    """

    size: int
    tiles: Tuple[int, ...]
    blank: int
    last_move: Optional[Direction]
    path_cost: int
    heuristic: int

    @classmethod
    def from_tiles(cls, tiles: Tuple[int, ...], size: int) -> "State":
        """Root state: no parent, zero path cost, heuristic computed from scratch."""
        tiles = tuple(tiles)
        return cls(
            size=size,
            tiles=tiles,
            blank=tiles.index(BLANK),
            last_move=None,
            path_cost=0,
            heuristic=manhattan_distance(tiles, size),
        )

    @property
    def total_cost(self) -> int:
        return self.path_cost + self.heuristic

    # ---- state properties
    def is_complete(self) -> bool:
        """Blank in the bottom-right cell, every other tile in row-major order."""
        return self.tiles == goal_tiles(self.size)

    # ---- convenient checks/conversions
    def idx_to_rc(self, idx: int) -> Tuple[int, int]:
        return (idx // self.size, idx % self.size)

    def blank_rc(self) -> Tuple[int, int]:
        return self.idx_to_rc(self.blank)

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        n = self.size
        return tuple(self.tiles[r * n:(r + 1) * n] for r in range(n))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.size == other.size and self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash((self.size, self.tiles))
