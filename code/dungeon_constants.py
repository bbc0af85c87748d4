"""Shared constants for the room-chain dungeon generator."""

from __future__ import annotations

DEFAULT_ORIGIN = (0, 0)
DEFAULT_TARGET_ROOMS = 8
DEFAULT_RETRY_BUDGET = 25  # Failed placements allowed at one anchor before the chain is closed early.
RANDOM_SEED = None  # Set to a number for reproducible behavior (for debugging); set to None to produce different dungeon on every run.

# Interior room dimensions, inclusive. Walls are added on top of these.
MIN_ROOM_WIDTH = 3
MAX_ROOM_WIDTH = 6
MIN_ROOM_HEIGHT = 2
MAX_ROOM_HEIGHT = 5

# Smallest interiors for which a door span and a ladder center both exist.
SMALLEST_ROOM_WIDTH = 3
SMALLEST_ROOM_HEIGHT = 2
