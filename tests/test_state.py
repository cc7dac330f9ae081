from puzzle_core.parser import parse_grid_str
from puzzle_core.moves import apply_moves
from puzzle_core.state import Direction, State, goal_tiles, manhattan_distance, opposite

GOAL = """1 2 3
4 5 6
7 8 x
"""

NEAR = """1 2 3
x 4 6
7 5 8
"""

def test_parse_goal_basic():
    s = parse_grid_str(GOAL)
    assert s.size == 3
    assert s.tiles == goal_tiles(3)
    assert s.blank == 8 and s.blank_rc() == (2, 2)
    assert s.path_cost == 0 and s.heuristic == 0
    assert s.last_move is None
    assert s.is_complete()


def test_cached_costs():
    s = parse_grid_str(NEAR)
    assert s.heuristic == 3
    assert s.total_cost == s.path_cost + s.heuristic == 3
    assert not s.is_complete()


def test_equality_ignores_history():
    a = parse_grid_str(GOAL)
    b = parse_grid_str(GOAL)
    assert a == b and hash(a) == hash(b)
    # up then down: same grid, different path
    c = apply_moves(a, "ud")
    assert c.path_cost == 2
    assert c == a and hash(c) == hash(a)
    assert len({a, b, c}) == 1


def test_not_equal_to_other_grid():
    assert parse_grid_str(GOAL) != parse_grid_str(NEAR)


def test_opposite_directions():
    for d in Direction:
        assert opposite(opposite(d)) == d
        assert opposite(d) != d
    assert {d.value for d in Direction} == {"u", "r", "d", "l"}


def test_from_tiles_computes_heuristic():
    s = State.from_tiles((2, 1, 3, 0), 2)
    assert s.blank == 3
    assert s.heuristic == manhattan_distance(s.tiles, 2) == 2
    assert s.rows() == ((2, 1), (3, 0))
