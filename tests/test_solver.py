import pytest
from puzzle_core.errors import UnsolvablePuzzle
from puzzle_core.io import format_solution, write_solution
from puzzle_core.parser import parse_grid_str
from puzzle_core.scramble import scramble
from search.solver import ALGORITHMS, solve

GOAL = """1 2 3
4 5 6
7 8 x
"""

SWAPPED = """2 1 3
4 5 6
7 8 x
"""

def test_every_algorithm_solves_goal():
    s = parse_grid_str(GOAL)
    for algo in ALGORITHMS:
        res = solve(s, algo=algo, workers=2, time_limit_s=30)
        assert res["success"] is True
        assert res["moves"] == ""


def test_algorithms_agree_on_optimal_length():
    s = scramble(3, 9, seed=5)
    bfs_len = solve(s, algo="bfs")["solution_len"]
    assert solve(s, algo="astar")["solution_len"] == bfs_len
    assert solve(s, algo="astar", heuristic="linear")["solution_len"] == bfs_len


def test_unsolvable_rejected():
    with pytest.raises(UnsolvablePuzzle):
        solve(parse_grid_str(SWAPPED))


def test_unsolvable_without_check_exhausts():
    res = solve(parse_grid_str("2 1\n3 x\n"), check_solvable=False)
    assert res["success"] is False
    assert res["reason"] == "exhausted"


def test_unknown_names():
    s = parse_grid_str(GOAL)
    with pytest.raises(ValueError):
        solve(s, algo="dfs")
    with pytest.raises(ValueError):
        solve(s, heuristic="nope")


def test_format_solution():
    assert format_solution("", 0.0) == "\n0.000\n"
    assert format_solution("rdl", 1.23456) == "rdl\n1.235\n"


def test_write_solution(tmp_path):
    out = tmp_path / "out.txt"
    write_solution(str(out), "ur", 0.5)
    assert out.read_text(encoding="utf-8") == "ur\n0.500\n"


def test_write_solution_bad_path(tmp_path):
    with pytest.raises(OSError):
        write_solution(str(tmp_path / "missing" / "out.txt"), "u", 0.0)
