class PuzzleError(Exception):
    pass


class ParseError(PuzzleError, ValueError):
    """Input grid is malformed."""


class IllegalMove(PuzzleError, ValueError):
    """Blank would leave the grid. Callers must check can_move() first."""


class UnsolvablePuzzle(PuzzleError):
    """Tile permutation has the wrong parity to reach the goal."""
