def format_solution(moves: str, elapsed: float) -> str:
    """Move string, then elapsed wall-clock seconds, each on its own line."""
    return f"{moves}\n{elapsed:.3f}\n"


def write_solution(path: str, moves: str, elapsed: float) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_solution(moves, elapsed))
