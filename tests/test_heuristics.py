import pytest
from puzzle_core.moves import successors
from puzzle_core.parser import parse_grid_str
from puzzle_core.scramble import scramble
from heuristics.classic import h_linear_conflict, h_manhattan, h_manhattan_full, h_zero
from heuristics.selector import get_heuristic

GOAL = """1 2 3
4 5 6
7 8 x
"""

SWAPPED = """2 1 3
4 5 6
7 8 x
"""

REVERSED_ROW = """3 2 1
4 5 6
7 8 x
"""

def test_zero_iff_complete():
    assert h_manhattan(parse_grid_str(GOAL)) == 0
    for seed in range(20):
        s = scramble(3, 12, seed=seed)
        assert (h_manhattan(s) == 0) == s.is_complete()


def test_cached_equals_full():
    s = scramble(4, 40, seed=7)
    assert h_manhattan(s) == h_manhattan_full(s)


def test_manhattan_values():
    assert h_manhattan(parse_grid_str(SWAPPED)) == 2
    assert h_manhattan(parse_grid_str(REVERSED_ROW)) == 4


def test_linear_conflict():
    assert h_linear_conflict(parse_grid_str(GOAL)) == 0
    assert h_linear_conflict(parse_grid_str(SWAPPED)) == 4
    # three mutually reversed tiles need two of them out of the row, not three
    assert h_linear_conflict(parse_grid_str(REVERSED_ROW)) == 8


def test_linear_conflict_dominates_manhattan():
    for seed in range(10):
        s = scramble(4, 50, seed=seed)
        assert h_linear_conflict(s) >= h_manhattan(s)


def test_consistent_along_moves():
    for seed in range(5):
        s = scramble(3, 20, seed=seed)
        for _, ns in successors(s):
            assert abs(h_manhattan(ns) - h_manhattan(s)) == 1


def test_selector():
    assert get_heuristic("zero") is h_zero
    assert get_heuristic("Manhattan") is h_manhattan
    assert get_heuristic("linear") is h_linear_conflict
    with pytest.raises(ValueError):
        get_heuristic("hungarian")
