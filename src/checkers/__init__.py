"""Checkers rule engine: board state, move legality, capture chains and undo."""

from .board import Board
from .errors import CheckersError, IllegalMoveError, InvalidSquareError, NotationError
from .types import Move, Piece, PieceColor, PieceType, Position

__all__ = [
    'Board',
    'Move',
    'Piece',
    'PieceColor',
    'PieceType',
    'Position',
    'CheckersError',
    'IllegalMoveError',
    'InvalidSquareError',
    'NotationError',
]
