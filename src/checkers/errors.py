"""Exception types for checkers."""


class CheckersError(Exception):
    """Base exception for checkers errors."""

    pass


class NotationError(CheckersError):
    """Raised when a square or move string cannot be parsed."""

    pass


class InvalidSquareError(CheckersError):
    """Raised when a piece is placed off the board or on a light square."""

    pass


class IllegalMoveError(CheckersError):
    """Raised when a move breaks the movement or capture rules."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
