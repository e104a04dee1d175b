"""Game rules for checkers."""

from typing import Dict, List, Optional, Tuple

from .errors import IllegalMoveError
from .types import Piece, PieceColor, Position

# Board dimensions
BOARD_SIZE = 8

# Starting rows for each color
RED_ROWS = range(0, 3)    # Rows 0, 1, 2
WHITE_ROWS = range(5, 8)  # Rows 5, 6, 7

# Diagonal directions (row_delta, col_delta)
FORWARD_DIRECTIONS_RED = [(1, -1), (1, 1)]      # Down-left, Down-right
FORWARD_DIRECTIONS_WHITE = [(-1, -1), (-1, 1)]  # Up-left, Up-right
ALL_DIRECTIONS = [(-1, -1), (-1, 1), (1, -1), (1, 1)]  # Kings, and every capture


def in_bounds(row: int, col: int) -> bool:
    """Check if a square is within the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_playable(row: int, col: int) -> bool:
    """Check if a square is a playable (dark) square."""
    return (row + col) % 2 == 1


def dark_squares() -> List[Position]:
    """All dark squares, row by row."""
    return [
        Position(row, col)
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
        if is_playable(row, col)
    ]


def _build_adjacency() -> Dict[Position, Tuple[Position, ...]]:
    adjacency = {}
    for pos in dark_squares():
        adjacency[pos] = tuple(
            Position(pos.row + dr, pos.col + dc)
            for dr, dc in ALL_DIRECTIONS
            if in_bounds(pos.row + dr, pos.col + dc)
        )
    return adjacency


# Diagonal neighbours of every dark square. Computed once, never mutated.
ADJACENCY: Dict[Position, Tuple[Position, ...]] = _build_adjacency()


def get_forward_directions(color: PieceColor) -> List[Tuple[int, int]]:
    """Get the forward diagonal directions for a color."""
    return FORWARD_DIRECTIONS_RED if color == PieceColor.RED else FORWARD_DIRECTIONS_WHITE


def get_move_directions(piece: Piece) -> List[Tuple[int, int]]:
    """Get the simple-move directions for a piece."""
    if piece.is_king:
        return ALL_DIRECTIONS
    return get_forward_directions(piece.color)


def get_capture_directions(piece: Piece) -> List[Tuple[int, int]]:
    """Captures are allowed along every diagonal, for men and kings alike."""
    return ALL_DIRECTIONS


def check_step(
    get_piece,
    start: Position,
    end: Position,
    color: PieceColor,
) -> Optional[Position]:
    """
    Validate a single one- or two-square step.

    Checks, in order: both squares on the board, a piece of ``color`` on
    ``start``, ``end`` empty, a diagonal displacement of magnitude 1 or 2,
    forward direction for a man's simple move, and an opposing piece on the
    midpoint of a capture.

    Args:
        get_piece: Callable returning the piece at a position, or None.
        start: Square the piece moves from.
        end: Square the piece moves to.
        color: Color of the player making the move.

    Returns:
        The position of the captured piece, or None for a simple move.

    Raises:
        IllegalMoveError: If any check fails.
    """
    if not in_bounds(*start) or not in_bounds(*end):
        raise IllegalMoveError(f"{tuple(start)} -> {tuple(end)} leaves the board")

    piece = get_piece(start)
    if piece is None or piece.color != color:
        raise IllegalMoveError(f"no {color.value} piece on {start}")

    if get_piece(end) is not None:
        raise IllegalMoveError(f"{end} is occupied")

    dr = end.row - start.row
    dc = end.col - start.col
    if abs(dr) != abs(dc) or abs(dr) not in (1, 2):
        raise IllegalMoveError(f"{start}-{end} is not a one or two square diagonal")

    if abs(dr) == 1:
        if not piece.is_king and dr != color.forward:
            raise IllegalMoveError(f"a man cannot move backward ({start}-{end})")
        return None

    mid = Position((start.row + end.row) // 2, (start.col + end.col) // 2)
    jumped = get_piece(mid)
    if jumped is None or jumped.color == color:
        raise IllegalMoveError(f"no opposing piece to jump on {mid}")
    return mid
