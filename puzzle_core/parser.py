from typing import List, Optional

from .errors import ParseError
from .state import BLANK, State

TOK_BLANK = "x"


def parse_grid_str(grid_str: str) -> State:
    """Parses a text grid into the root State.

    Format:
      rows are separated by newlines, columns by whitespace;
      every cell is a positive tile label or 'x' / 'X' for the blank;
      the grid must be square, N >= 2, labels exactly 1..N²-1;
      no leading blank line, trailing blank lines are fine.
    """
    lines = grid_str.splitlines()
    while lines and lines[-1].strip() == "":
        lines.pop()
    if not lines:
        raise ParseError("Empty grid")
    if lines[0].strip() == "":
        raise ParseError("Grid must not start with a blank line")

    size = len(lines)
    if size < 2:
        raise ParseError(f"Grid must be at least 2x2, got {size} row(s)")

    tiles: List[int] = []
    blank: Optional[int] = None
    for r, line in enumerate(lines):
        cols = line.split()
        if len(cols) != size:
            raise ParseError(f"Row {r + 1} has {len(cols)} column(s), expected {size}")
        for c, tok in enumerate(cols):
            if tok.lower() == TOK_BLANK:
                if blank is not None:
                    raise ParseError(f"Found multiple blank markers (row {r + 1}, column {c + 1})")
                blank = r * size + c
                tiles.append(BLANK)
                continue
            try:
                tiles.append(int(tok, 10))
            except ValueError:
                raise ParseError(f"Invalid token {tok!r} at row {r + 1}, column {c + 1}") from None

    if blank is None:
        raise ParseError(f"No blank marker '{TOK_BLANK}' found in grid")

    labels = sorted(t for t in tiles if t != BLANK)
    if labels != list(range(1, size * size)):
        raise ParseError(f"Tiles must be exactly the labels 1..{size * size - 1}")

    return State.from_tiles(tuple(tiles), size)


def parse_grid_file(path: str) -> State:
    with open(path, "r", encoding="utf-8") as f:
        return parse_grid_str(f.read())


def format_grid(state: State) -> str:
    """Inverse of parse_grid_str: the text form accepted by the parser."""
    lines = []
    for row in state.rows():
        lines.append(" ".join(TOK_BLANK if t == BLANK else str(t) for t in row))
    return "\n".join(lines) + "\n"
