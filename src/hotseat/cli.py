"""Command-line entry point: ``hotseat`` or ``python -m hotseat``."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from . import config as _cfg
from .battleship import BoardError
from .game import GameController
from .io_utils import ConsoleIO

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hotseat", description="Two-player hot-seat Battleship")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the ship placement for a reproducible game.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format=_cfg.LOG_FORMAT,
        stream=sys.stderr,
    )

    console = ConsoleIO()
    try:
        game = GameController.new(console, console, rng=random.Random(args.seed))
        winner = game.run()
    except BoardError:
        logger.exception("Board invariant violated – aborting")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        console.announce_game_over()
        return 0

    if winner is not None:
        console.present_fleets(game.board_a, game.board_b)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
