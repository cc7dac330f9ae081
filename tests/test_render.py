"""Tests for the render module."""

from puzzle_core.parser import parse_grid_str
from puzzle_core.render import render_ascii

GOAL = """1 2 3
4 5 6
7 8 x
"""

def test_render_basic_board():
    s = parse_grid_str(GOAL)
    lines = render_ascii(s).splitlines()
    assert lines[0] == "+---+---+---+"
    assert lines[1] == "| 1 | 2 | 3 |"
    assert lines[5] == "| 7 | 8 |   |"
    assert len(lines) == 7


def test_render_pads_two_digit_labels():
    s = parse_grid_str("1 2 3 4\n5 6 7 8\n9 10 11 12\n13 14 15 x\n")
    lines = render_ascii(s).splitlines()
    assert lines[1] == "|  1 |  2 |  3 |  4 |"
    assert lines[7] == "| 13 | 14 | 15 |    |"
