#!/usr/bin/env python3

from __future__ import annotations

import argparse
import contextlib
import random
import sys
from typing import List, Optional

from dungeon_config import DungeonConfig
from dungeon_constants import DEFAULT_RETRY_BUDGET, DEFAULT_TARGET_ROOMS
from dungeon_generator import DungeonGenerator
from dungeon_models import rooms_to_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a chain of rooms and print it as JSON for a renderer."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed; a random one is picked and reported when omitted",
    )
    parser.add_argument(
        "--rooms",
        type=int,
        default=DEFAULT_TARGET_ROOMS,
        help=f"Target number of rooms (default: {DEFAULT_TARGET_ROOMS})",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=DEFAULT_RETRY_BUDGET,
        help=f"Failed placements allowed per anchor (default: {DEFAULT_RETRY_BUDGET})",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indentation for the JSON output (default: compact)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Report progress on stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.rooms <= 0:
        raise SystemExit("Number of rooms must be a positive integer")
    if args.retries < 0:
        raise SystemExit("Retry budget must be non-negative")

    seed = args.seed
    if seed is None:
        # Pick a random seed randomly and print it, so we can reproduce bugs by passing it back in.
        seed = random.randint(0, 1000000)
    print(f"Using random seed {seed}", file=sys.stderr)

    config = DungeonConfig(
        target_rooms=args.rooms,
        retry_budget=args.retries,
        random_seed=seed,
        verbose=args.verbose,
    )
    # Progress lines share stdout with the JSON, so divert them.
    with contextlib.redirect_stdout(sys.stderr):
        rooms = DungeonGenerator(config).generate()
    print(rooms_to_json(rooms, indent=args.indent))


if __name__ == "__main__":
    main()
