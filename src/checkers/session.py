"""Console game loop: a human against a computer that plays random legal moves."""

import logging
import random
from enum import Enum
from typing import Callable, Optional

from .board import Board
from .errors import NotationError
from .movegen import has_legal_moves
from .notation import format_square, parse_move
from .types import Move, PieceColor

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    """State of a game session."""
    PLAYING = "playing"
    HUMAN_WON = "human_won"
    COMPUTER_WON = "computer_won"
    EXITED = "exited"


class GameSession:
    """
    Drives turns between a human and the computer.

    The board knows nothing about turns; the session tracks whose turn it
    is, reads the human's commands and picks the computer's moves.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        human: PieceColor = PieceColor.RED,
        rng: Optional[random.Random] = None,
        output: Callable[[str], None] = print,
        show_board: bool = True,
    ):
        self.board = board if board is not None else Board.initial()
        self.human = human
        self.current = human
        self.rng = rng if rng is not None else random.Random()
        self.output = output
        self.show_board = show_board
        self.status = SessionStatus.PLAYING

    @property
    def computer(self) -> PieceColor:
        return self.human.opponent()

    @property
    def is_over(self) -> bool:
        return self.status != SessionStatus.PLAYING

    def prompt(self) -> str:
        color = self.human
        return f"Your move ( {color.value.capitalize()}({color.symbol}) e.g., b6-c5) or 'undo' or 'exit':"

    def swap_turn(self) -> None:
        self.current = self.current.opponent()

    def resolve_move(self, move: Move, color: PieceColor) -> Move:
        """Return the legal move with the same start and end squares, so chains can be typed as origin-destination."""
        for legal in self.board.all_valid_moves(color):
            if legal == move:
                return legal
        return move

    def handle_input(self, line: str) -> None:
        """Process one line typed by the human on their turn."""
        command = line.strip()

        if command.lower() == "exit":
            self.status = SessionStatus.EXITED
            return

        if command.lower() == "undo":
            self.board.undo()
            self.swap_turn()
            logger.info("Undo, %s to move", self.current.value)
            return

        try:
            move = parse_move(command)
        except NotationError as e:
            logger.debug("Malformed input %r: %s", command, e)
            self.output("Invalid input")
            return

        move = self.resolve_move(move, self.human)
        if not self.board.apply_move(move, self.human):
            self.output("Invalid move.")
            return

        logger.info("Human played %s", move)
        self.current = self.computer

    def computer_turn(self) -> Optional[Move]:
        """Play a uniformly random legal move for the computer, or end the game if there is none."""
        moves = self.board.all_valid_moves(self.computer)
        if not moves:
            self.output("Computer has no moves. You win!")
            self.status = SessionStatus.HUMAN_WON
            return None

        choice = self.rng.choice(moves)
        self.board.apply_move(choice, self.computer)
        color = self.computer
        self.output(
            f"Computer moves {color.value}({color.symbol}) from "
            f"{format_square(choice.start)} to {format_square(choice.end)}"
        )
        logger.info("Computer played %r", choice)
        self.current = self.human
        return choice

    def run(self, input_fn: Optional[Callable[[str], str]] = None) -> SessionStatus:
        """Play until someone wins, the human exits, or input runs out."""
        if input_fn is None:
            input_fn = input
        while not self.is_over:
            if self.show_board:
                self.output(self.board.render())

            if self.current == self.computer:
                self.computer_turn()
                continue

            if not has_legal_moves(self.board, self.human):
                self.output("You have no moves. Computer wins!")
                self.status = SessionStatus.COMPUTER_WON
                break

            self.output(self.prompt())
            try:
                line = input_fn("")
            except EOFError:
                self.status = SessionStatus.EXITED
                break
            self.handle_input(line)

        return self.status
