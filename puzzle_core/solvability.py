from typing import List

from .state import BLANK, State


def inversions(state: State) -> int:
    """Pairs of tiles (blank excluded) that appear in the wrong row-major order."""
    arr: List[int] = [t for t in state.tiles if t != BLANK]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def is_solvable(state: State) -> bool:
    """Solvability rules:
       - N odd: inversions must be even
       - N even: (inversions + blank_row_from_bottom) must be ODD
         (row count is 1-based from the bottom)
    """
    inv = inversions(state)
    if state.size % 2 == 1:
        return inv % 2 == 0
    blank_row_from_bottom = state.size - state.blank // state.size
    return (inv + blank_row_from_bottom) % 2 == 1
