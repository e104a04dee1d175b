"""Board state representation for checkers."""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import IllegalMoveError, InvalidSquareError
from .rules import BOARD_SIZE, RED_ROWS, WHITE_ROWS, check_step, in_bounds, is_playable
from .types import Move, Piece, PieceColor, Position

logger = logging.getLogger(__name__)

Grid = Dict[Position, Piece]


class Board:
    """
    8x8 checkers board with undo history.

    Only dark squares are used: those where (row + col) % 2 == 1.
    Row 0 is the top; Red starts on rows 0-2, White on rows 5-7.

    Pieces are immutable, so a shallow copy of the grid mapping is a full
    snapshot of the position.
    """

    SIZE = BOARD_SIZE

    def __init__(self, setup: bool = True):
        """Create a board, with the standard layout unless ``setup`` is False."""
        # Maps position (row, col) -> Piece
        self._pieces: Grid = {}
        self._history: List[Grid] = []
        if setup:
            self._place_initial_pieces()

    @classmethod
    def initial(cls) -> "Board":
        """Create a board with the standard initial setup."""
        return cls()

    @classmethod
    def empty(cls) -> "Board":
        """Create a board with no pieces."""
        return cls(setup=False)

    def _place_initial_pieces(self) -> None:
        for row in WHITE_ROWS:
            for col in range(self.SIZE):
                if is_playable(row, col):
                    self.set_piece((row, col), Piece(PieceColor.WHITE))
        for row in RED_ROWS:
            for col in range(self.SIZE):
                if is_playable(row, col):
                    self.set_piece((row, col), Piece(PieceColor.RED))

    def clone(self) -> "Board":
        """Create a copy of this board, history included."""
        new_board = Board.empty()
        new_board._pieces = dict(self._pieces)
        new_board._history = [dict(snap) for snap in self._history]
        return new_board

    @staticmethod
    def is_playable(row: int, col: int) -> bool:
        """Check if a square is a playable (dark) square."""
        return is_playable(row, col)

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        """Check if a position is within the board."""
        return in_bounds(row, col)

    def get_piece(self, pos: Tuple[int, int]) -> Optional[Piece]:
        """Get the piece at a position, or None if empty."""
        return self._pieces.get(Position(*pos))

    def set_piece(self, pos: Tuple[int, int], piece: Optional[Piece]) -> None:
        """Set or remove a piece at a position."""
        pos = Position(*pos)
        if piece is None:
            self._pieces.pop(pos, None)
            return
        if not in_bounds(*pos) or not is_playable(*pos):
            raise InvalidSquareError(f"pieces can only stand on dark squares, not {tuple(pos)}")
        self._pieces[pos] = piece

    def remove_piece(self, pos: Tuple[int, int]) -> Optional[Piece]:
        """Remove and return the piece at a position."""
        return self._pieces.pop(Position(*pos), None)

    def is_empty(self, pos: Tuple[int, int]) -> bool:
        """Check if a position is empty."""
        return Position(*pos) not in self._pieces

    def get_pieces(self, color: Optional[PieceColor] = None) -> Iterator[Tuple[Position, Piece]]:
        """Iterate over all pieces, optionally filtered by color."""
        for pos, piece in self._pieces.items():
            if color is None or piece.color == color:
                yield pos, piece

    def count_pieces(self, color: PieceColor) -> Tuple[int, int]:
        """Count (men, kings) for a color."""
        men = 0
        kings = 0
        for _, piece in self.get_pieces(color):
            if piece.is_king:
                kings += 1
            else:
                men += 1
        return men, kings

    def snapshot(self) -> Grid:
        """Return a copy of the current grid."""
        return dict(self._pieces)

    @property
    def history_size(self) -> int:
        """Number of positions that can be undone."""
        return len(self._history)

    def validate_move(self, move: Move, color: PieceColor) -> Grid:
        """
        Check a move and compute the grid it leads to, without touching the board.

        Every hop of a chain must be a capture; the position is updated hop
        by hop so each jump is checked against the pieces still standing.
        A man reaching its back rank at the end of the move is crowned.

        Returns:
            The grid after the move.

        Raises:
            IllegalMoveError: If any hop breaks the rules.
        """
        grid = dict(self._pieces)
        for start, end in move.hops():
            captured = check_step(grid.get, start, end, color)
            if captured is None and move.is_chain:
                raise IllegalMoveError(f"{start}-{end} in a chain is not a jump")
            grid[end] = grid.pop(start)
            if captured is not None:
                del grid[captured]

        piece = grid[move.end]
        if not piece.is_king and move.end.row == color.promotion_row:
            grid[move.end] = piece.promote()
        return grid

    def apply_move(self, move: Move, color: PieceColor) -> bool:
        """
        Apply a move for a player.

        The position before the move is pushed onto the history stack so it
        can be restored with ``undo``. Nothing changes if the move is illegal.

        Returns:
            True if the move was legal and applied.
        """
        try:
            new_grid = self.validate_move(move, color)
        except IllegalMoveError as e:
            logger.debug("Rejected %s move %s: %s", color.value, move, e.reason)
            return False

        self._history.append(dict(self._pieces))
        self._pieces = new_grid
        logger.debug("Applied %s move %r", color.value, move)
        return True

    def undo(self) -> bool:
        """Restore the position before the last applied move. Returns True if successful."""
        if not self._history:
            logger.debug("Nothing to undo")
            return False
        self._pieces = self._history.pop()
        return True

    def all_valid_moves(self, color: PieceColor) -> List[Move]:
        """Get every legal move for a player. Empty when the player has lost."""
        from .movegen import generate_all_moves
        return generate_all_moves(self, color)

    def render(self) -> str:
        """Render the board as an ASCII diagram, rank 8 at the top."""
        header = "  a b c d e f g h"
        lines = [header]
        for row in range(self.SIZE):
            rank = self.SIZE - row
            cells = []
            for col in range(self.SIZE):
                piece = self._pieces.get(Position(row, col))
                cells.append("." if piece is None else piece.symbol)
            lines.append(f"{rank} {' '.join(cells)} {rank}")
        lines.append(header)
        return "\n".join(lines)

    def display(self) -> None:
        """Print the board diagram."""
        print(self.render())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board({len(self._pieces)} pieces)"
