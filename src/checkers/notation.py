"""Square and move notation: columns a-h, ranks 1-8 with rank 8 on row 0."""

from typing import Tuple

from .errors import NotationError
from .types import Move, Position

FILES = "abcdefgh"
RANKS = "12345678"


def parse_square(text: str) -> Position:
    """Convert a square name like "b6" to a Position (row 2, col 1)."""
    text = text.strip().lower()
    if len(text) != 2 or text[0] not in FILES or text[1] not in RANKS:
        raise NotationError(f"not a square: {text!r}")
    return Position(8 - int(text[1]), FILES.index(text[0]))


def format_square(pos: Tuple[int, int]) -> str:
    """Convert a position to its square name, e.g. (5, 2) -> "c3"."""
    return str(Position(*pos))


def parse_move(text: str) -> Move:
    """
    Parse a move written as ``<from>-<to>``, e.g. "b6-c5".

    Raises:
        NotationError: If the text does not split into exactly two squares.
    """
    parts = text.strip().split("-")
    if len(parts) != 2:
        raise NotationError(f"expected <from>-<to>, got {text!r}")
    return Move(parse_square(parts[0]), parse_square(parts[1]))


def format_move(move: Move) -> str:
    """Format a move as ``<from>-<to>``."""
    return f"{format_square(move.start)}-{format_square(move.end)}"
