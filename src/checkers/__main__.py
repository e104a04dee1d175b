"""Main entry point for checkers."""

import argparse
import random
import sys
from pathlib import Path

from .config import Config, get_config, setup_logger
from .session import GameSession
from .types import PieceColor


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="checkers",
        description="Play checkers against a computer that picks random legal moves.",
    )
    parser.add_argument("--config", type=Path, default=None,
                        help="Path to a settings.yaml file")
    parser.add_argument("--color", choices=["red", "white"], default=None,
                        help="Color played by the human (default from config: red)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the computer's move choice")
    parser.add_argument("--no-board", action="store_true",
                        help="Do not print the board before each turn")
    parser.add_argument("--log-level", default=None, type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default from config: WARNING)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = Config.load(args.config) if args.config else get_config()

    setup_logger(
        "checkers",
        log_file=config.logging.file,
        level=args.log_level or config.logging.level,
    )

    human = PieceColor(args.color or config.session.human_color)
    seed = args.seed if args.seed is not None else config.session.seed
    session = GameSession(
        human=human,
        rng=random.Random(seed),
        show_board=config.session.show_board and not args.no_board,
    )
    session.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
