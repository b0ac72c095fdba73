from __future__ import annotations

import argparse
import logging
import random
import sys

from game.errors import ConfigurationError
from ui.cli import ConsoleIO, gameloop


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="mastermind", description="Play Mastermind in the terminal."
    )
    ap.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the secret code (reproducible games).",
    )
    ap.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level written to stderr.",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, args.log_level),
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    console = ConsoleIO(sys.stdin, sys.stdout)

    try:
        gameloop(console, rng=rng)
    except ConfigurationError as e:
        console.display(f"Cannot start game: {e}")
        return 2
    except (EOFError, KeyboardInterrupt):
        console.display("\nExiting game.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
