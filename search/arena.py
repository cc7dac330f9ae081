from __future__ import annotations
from typing import List, Optional

from puzzle_core.state import State, opposite


class NodeArena:
    """Append-only store of search nodes.

    A node is a State plus the id of the node it was expanded from, so a
    path is a chain of integer ids ending at the root (parent None).
    One arena belongs to one search call.
    """
    def __init__(self) -> None:
        self.states: List[State] = []
        self.parents: List[Optional[int]] = []

    def add(self, state: State, parent: Optional[int] = None) -> int:
        self.states.append(state)
        self.parents.append(parent)
        return len(self.states) - 1

    def path(self, node_id: int) -> List[State]:
        """States from the root to node_id."""
        out: List[State] = []
        cur: Optional[int] = node_id
        while cur is not None:
            out.append(self.states[cur])
            cur = self.parents[cur]
        out.reverse()
        return out

    def moves(self, node_id: int) -> str:
        """Solution string for the path ending at node_id."""
        chars: List[str] = []
        cur: Optional[int] = node_id
        while self.parents[cur] is not None:
            # last_move points back to the parent; the move taken was its opposite
            chars.append(opposite(self.states[cur].last_move).value)
            cur = self.parents[cur]
        chars.reverse()
        return "".join(chars)

    def __len__(self) -> int:
        return len(self.states)
