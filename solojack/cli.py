"""
Play blackjack in the terminal.

    solojack --chips 500 --seed 42 --transcript session.log
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

from solojack.adapters import CLIAdapter
from solojack.blackjack.constants import DEFAULT_CHIPS
from solojack.common.io_interface import ConsoleIOInterface, LoggingIOInterface
from solojack.engine import BlackjackEngine

LOG_LEVEL_ENV = "SOLOJACK_LOG_LEVEL"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solojack", description="Single-player blackjack against the dealer"
    )
    parser.add_argument(
        "--chips",
        type=int,
        default=DEFAULT_CHIPS,
        help=f"Starting chip balance (default: {DEFAULT_CHIPS})",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed the shuffle for a repeatable game"
    )
    parser.add_argument(
        "--rounds", type=int, default=None, help="Stop after this many rounds"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on invalid requests instead of ignoring them",
    )
    parser.add_argument(
        "--transcript", default=None, help="Also write the session to this file"
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV, "WARNING").upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def setup_logging(level: str) -> None:
    """Configure logging once at program start."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.chips < 0:
        print("Chip balance cannot be negative.", file=sys.stderr)
        return 2

    io_interface = ConsoleIOInterface()
    if args.transcript:
        io_interface = LoggingIOInterface(args.transcript, inner=io_interface)

    engine = BlackjackEngine(
        CLIAdapter(io_interface),
        {"initial_chips": args.chips, "seed": args.seed, "strict": args.strict},
    )

    try:
        state = asyncio.run(engine.run(max_rounds=args.rounds))
    except KeyboardInterrupt:
        print("\nGoodbye!")
        return 130

    chips = state.chips if state is not None else args.chips
    print(f"You leave the table with {chips} chips.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
