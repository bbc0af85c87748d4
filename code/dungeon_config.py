"""Configuration container for the room-chain dungeon generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dungeon_constants import (
    DEFAULT_ORIGIN,
    DEFAULT_RETRY_BUDGET,
    DEFAULT_TARGET_ROOMS,
    MAX_ROOM_HEIGHT,
    MAX_ROOM_WIDTH,
    MIN_ROOM_HEIGHT,
    MIN_ROOM_WIDTH,
    RANDOM_SEED,
    SMALLEST_ROOM_HEIGHT,
    SMALLEST_ROOM_WIDTH,
)
from dungeon_geometry import Point

if TYPE_CHECKING:
    from sampling import IntSampler


@dataclass(frozen=True)
class SizeRange:
    """Inclusive range of interior room sizes along one axis."""

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        minimum = int(self.minimum)
        maximum = int(self.maximum)
        if minimum <= 0:
            raise ValueError("SizeRange minimum must be positive")
        if maximum < minimum:
            raise ValueError("SizeRange maximum must be >= minimum")
        object.__setattr__(self, "minimum", minimum)
        object.__setattr__(self, "maximum", maximum)

    def sample(self, sampler: IntSampler) -> int:
        return sampler.uniform_int(self.minimum, self.maximum)

    @classmethod
    def default_width(cls) -> SizeRange:
        return cls(MIN_ROOM_WIDTH, MAX_ROOM_WIDTH)

    @classmethod
    def default_height(cls) -> SizeRange:
        return cls(MIN_ROOM_HEIGHT, MAX_ROOM_HEIGHT)


@dataclass
class DungeonConfig:
    """Aggregates all tunable parameters for dungeon generation."""

    # Anchor of the first room.
    origin: Point = field(default_factory=lambda: Point(*DEFAULT_ORIGIN))
    # Rooms to place; the chain may end shorter if placement keeps failing.
    target_rooms: int = DEFAULT_TARGET_ROOMS
    # Collisions tolerated at one anchor; the chain closes once this goes negative.
    retry_budget: int = DEFAULT_RETRY_BUDGET
    room_width: SizeRange = field(default_factory=SizeRange.default_width)
    room_height: SizeRange = field(default_factory=SizeRange.default_height)
    random_seed: int | None = RANDOM_SEED
    collect_metrics: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.origin, Point):
            self.origin = Point.from_tuple(tuple(int(v) for v in self.origin))
        if self.target_rooms <= 0:
            raise ValueError("DungeonConfig target_rooms must be positive")
        if self.retry_budget < 0:
            raise ValueError("DungeonConfig retry_budget cannot be negative")
        if self.room_width.minimum < SMALLEST_ROOM_WIDTH:
            raise ValueError(
                f"DungeonConfig room_width must be at least {SMALLEST_ROOM_WIDTH} to fit a door"
            )
        if self.room_height.minimum < SMALLEST_ROOM_HEIGHT:
            raise ValueError(
                f"DungeonConfig room_height must be at least {SMALLEST_ROOM_HEIGHT} to fit a ladder"
            )

    @property
    def attempts_per_anchor(self) -> int:
        return self.retry_budget + 1

    @property
    def max_placement_attempts(self) -> int:
        """Upper bound on loop iterations for one chain."""
        return self.target_rooms * self.attempts_per_anchor
