from .state import BLANK, State


def render_ascii(state: State) -> str:
    """ASCII visualization of the board."""
    width = len(str(state.size * state.size - 1))
    horizontal = "+" + "+".join(["-" * (width + 2)] * state.size) + "+"
    out_lines = [horizontal]
    for row in state.rows():
        cells = []
        for t in row:
            text = " " * width if t == BLANK else f"{t:>{width}}"
            cells.append(f" {text} ")
        out_lines.append("|" + "|".join(cells) + "|")
        out_lines.append(horizontal)
    return "\n".join(out_lines)
