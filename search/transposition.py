from __future__ import annotations
from typing import Dict
from puzzle_core.state import State

class Transposition:
    """Store the best known g(s) per configuration (State equality ignores history)."""
    def __init__(self) -> None:
        self.best_g: Dict[State, int] = {}

    def seen_better(self, s: State, g: int) -> bool:
        """Records g for s unless an equal or cheaper path is already known."""
        old = self.best_g.get(s)
        if old is None or g < old:
            self.best_g[s] = g
            return False
        return True

    def best(self, s: State) -> int:
        return self.best_g[s]

    def __len__(self) -> int:
        return len(self.best_g)
