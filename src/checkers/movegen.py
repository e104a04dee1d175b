"""Move generation for checkers."""

from typing import Dict, List, Tuple

from .board import Board
from .rules import ADJACENCY, get_capture_directions, get_move_directions, in_bounds
from .types import Move, Piece, PieceColor, Position


def generate_simple_moves(board: Board, pos: Position, piece: Piece) -> List[Move]:
    """Generate one-square moves onto empty squares for a piece."""
    moves = []
    row, col = pos

    for dr, dc in get_move_directions(piece):
        new_row, new_col = row + dr, col + dc
        if in_bounds(new_row, new_col) and board.is_empty((new_row, new_col)):
            moves.append(Move(pos, (new_row, new_col)))

    return moves


def generate_single_captures(board: Board, pos: Position, piece: Piece) -> List[Move]:
    """Generate one-jump captures for a piece, in every diagonal direction."""
    moves = []
    row, col = pos

    for dr, dc in get_capture_directions(piece):
        land_row, land_col = row + 2 * dr, col + 2 * dc
        if not in_bounds(land_row, land_col):
            continue
        jumped = board.get_piece((row + dr, col + dc))
        if jumped is None or jumped.color == piece.color:
            continue
        if board.is_empty((land_row, land_col)):
            moves.append(Move(pos, (land_row, land_col)))

    return moves


def _search_jumps(
    board: Board,
    current: Position,
    color: PieceColor,
    path: List[Position],
    results: List[List[Position]],
) -> None:
    """
    Depth-first search for capture chains from ``current``.

    Each jumped piece is lifted off the board for the duration of its branch
    and put back before the next branch is tried, so the board is unchanged
    once the search returns.

    Args:
        board: Board to search; temporarily mutated.
        current: Square the moving piece has reached.
        color: Color of the moving piece.
        path: Squares visited so far, origin first.
        results: Receives a copy of ``path`` for every maximal chain.
    """
    extended = False

    for neighbor in ADJACENCY.get(current, ()):
        dr = neighbor.row - current.row
        dc = neighbor.col - current.col
        jump = Position(current.row + 2 * dr, current.col + 2 * dc)
        if not in_bounds(*jump) or not board.is_empty(jump):
            continue

        captured = board.get_piece(neighbor)
        if captured is None or captured.color == color:
            continue

        extended = True
        board.remove_piece(neighbor)
        path.append(jump)
        try:
            _search_jumps(board, jump, color, path, results)
        finally:
            path.pop()
            board.set_piece(neighbor, captured)

    if not extended and len(path) > 1:
        results.append(list(path))


def generate_capture_chains(board: Board, pos: Position, piece: Piece) -> List[Move]:
    """
    Generate one move per maximal capture chain starting at ``pos``.

    The moving piece stays on its origin square during the search. A chain
    made of a single jump is returned as a plain two-square move.
    """
    chains: List[List[Position]] = []
    _search_jumps(board, Position(*pos), piece.color, [Position(*pos)], chains)
    return [Move(chain[0], chain[-1], via=tuple(chain[1:-1])) for chain in chains]


def generate_all_moves(board: Board, color: PieceColor) -> List[Move]:
    """
    Generate all legal moves for a player.

    Simple moves, single captures and capture chains are collected for every
    piece of ``color``. Moves sharing the same (start, end) squares are
    reported once; the first one generated is kept.

    Returns:
        List of legal Move objects. Empty when the player cannot move.
    """
    moves: Dict[Tuple[Position, Position], Move] = {}

    for pos, piece in list(board.get_pieces(color)):
        for move in (
            generate_simple_moves(board, pos, piece)
            + generate_single_captures(board, pos, piece)
            + generate_capture_chains(board, pos, piece)
        ):
            moves.setdefault((move.start, move.end), move)

    return list(moves.values())


def has_legal_moves(board: Board, color: PieceColor) -> bool:
    """Check if a player has any legal move."""
    for pos, piece in list(board.get_pieces(color)):
        if generate_simple_moves(board, pos, piece):
            return True
        if generate_single_captures(board, pos, piece):
            return True
    return False
