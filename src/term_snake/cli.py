"""Console entry point for the terminal snake game."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Play Snake in the terminal. Steer with h/j/k/l, quit with q.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file instead of stderr.",
    )
    parser.add_argument(
        "--log-level", type=str, default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO with --log-file, WARNING otherwise).",
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    # Anything below WARNING on stderr would scribble over the game screen.
    default_level = "INFO" if args.log_file else "WARNING"
    logging.basicConfig(
        level=getattr(logging, args.log_level or default_level),
        format=_LOG_FORMAT,
        filename=args.log_file,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args)

    from term_snake.controller import GameController, GameOverReason
    from term_snake.terminal import AnsiTerminal

    result = GameController(AnsiTerminal()).run()

    verdict = "Game over" if result.reason is GameOverReason.COLLISION else "Bye"
    print(f"{verdict}! score: {result.score}")  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
