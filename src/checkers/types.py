"""Type definitions for checkers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, NamedTuple, Tuple


class PieceColor(Enum):
    """Player colors."""
    RED = "red"      # Starts on rows 0-2, moves toward row 7
    WHITE = "white"  # Starts on rows 5-7, moves toward row 0

    def opponent(self) -> "PieceColor":
        """Return the opposing color."""
        return PieceColor.WHITE if self == PieceColor.RED else PieceColor.RED

    @property
    def forward(self) -> int:
        """Row delta of a forward step for a man of this color."""
        return 1 if self == PieceColor.RED else -1

    @property
    def promotion_row(self) -> int:
        """Back rank on which a man of this color is crowned."""
        return 7 if self == PieceColor.RED else 0

    @property
    def symbol(self) -> str:
        return "r" if self == PieceColor.RED else "w"


class PieceType(Enum):
    """Ranks of pieces."""
    MAN = "man"
    KING = "king"


@dataclass(frozen=True)
class Piece:
    """A piece on the board."""
    color: PieceColor
    piece_type: PieceType = PieceType.MAN

    @property
    def is_king(self) -> bool:
        """Check if this piece is a king."""
        return self.piece_type == PieceType.KING

    def promote(self) -> "Piece":
        """Return a promoted (king) version of this piece."""
        return Piece(self.color, PieceType.KING)

    @property
    def symbol(self) -> str:
        """Single-character rendering: r/w for men, R/W for kings."""
        return self.color.symbol.upper() if self.is_king else self.color.symbol


class Position(NamedTuple):
    """A square on the board, row 0 at the top."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"{chr(ord('a') + self.col)}{8 - self.row}"


@dataclass(frozen=True)
class Move:
    """
    A move from one square to another.

    Attributes:
        start: Square the moving piece starts on.
        end: Square the moving piece finishes on.
        via: Intermediate landing squares of a multi-jump chain. Empty for
             simple moves and single captures. Not part of equality, so two
             moves with the same start and end compare equal.
    """
    start: Position
    end: Position
    via: Tuple[Position, ...] = field(default=(), compare=False)

    def __post_init__(self):
        object.__setattr__(self, "start", Position(*self.start))
        object.__setattr__(self, "end", Position(*self.end))
        object.__setattr__(self, "via", tuple(Position(*p) for p in self.via))

    @property
    def path(self) -> Tuple[Position, ...]:
        """All squares visited, from start to end."""
        return (self.start,) + self.via + (self.end,)

    @property
    def is_chain(self) -> bool:
        return len(self.via) > 0

    @property
    def is_capture(self) -> bool:
        """Check if this move jumps at least one piece."""
        return self.is_chain or abs(self.end.row - self.start.row) == 2

    def hops(self) -> Iterator[Tuple[Position, Position]]:
        """Yield each (from, to) step of the move."""
        path = self.path
        for i in range(len(path) - 1):
            yield path[i], path[i + 1]

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    def __repr__(self) -> str:
        path_str = "->".join(f"({r},{c})" for r, c in self.path)
        return f"Move({path_str})"
