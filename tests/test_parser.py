import pytest
from puzzle_core.errors import ParseError
from puzzle_core.parser import format_grid, parse_grid_file, parse_grid_str


def test_blank_marker_case_insensitive():
    a = parse_grid_str("1 2\n3 x\n")
    b = parse_grid_str("1 2\n3 X\n")
    assert a == b
    assert a.is_complete()


def test_whitespace_and_trailing_lines():
    s = parse_grid_str("1  2\t3\n4 5 6\n7 8 x\n\n\n")
    assert s.size == 3 and s.is_complete()


@pytest.mark.parametrize("text", [
    "",
    "\n1 2\n3 x\n",
    "1 2 3\n4 x 5\n",
    "1 2\n3 x 4\n",
    "x\n",
    "x 1\nx 2\n",
    "1 2\n3 4\n",
    "1 a\n3 x\n",
    "1 1\n3 x\n",
    "1 2\n5 x\n",
])
def test_malformed_input(text):
    with pytest.raises(ParseError):
        parse_grid_str(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_grid_str("1 2\n3 4\n")


def test_file_round_trip(tmp_path):
    text = "4 1 2\n5 x 3\n7 8 6\n"
    p = tmp_path / "in.txt"
    p.write_text(text, encoding="utf-8")
    s = parse_grid_file(str(p))
    assert format_grid(s) == text
