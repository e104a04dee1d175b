"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def board():
    """Create a board with the standard initial setup."""
    from checkers.board import Board
    return Board.initial()


@pytest.fixture
def empty_board():
    """Create a board with no pieces."""
    from checkers.board import Board
    return Board.empty()


@pytest.fixture
def make_board():
    """Build a board from a {(row, col): Piece} layout."""
    from checkers.board import Board

    def _make(layout):
        b = Board.empty()
        for pos, piece in layout.items():
            b.set_piece(pos, piece)
        return b

    return _make
