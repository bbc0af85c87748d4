"""Injectable integer sampling used by every random decision in generation."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol

from dungeon_geometry import DIRECTIONS, Direction


class IntSampler(Protocol):
    """Anything that can draw a uniform integer from an inclusive range."""

    def uniform_int(self, minimum: int, maximum: int) -> int:
        ...


class RandomSampler:
    """Sampler backed by ``random.Random``."""

    def __init__(self, seed: int | None = None, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def uniform_int(self, minimum: int, maximum: int) -> int:
        return self.rng.randint(minimum, maximum)


class ScriptedSampler:
    """Replays a fixed sequence of integers, for reproducible generation."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = [int(v) for v in values]
        self._position = 0
        self.requests: List[tuple[int, int]] = []

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def uniform_int(self, minimum: int, maximum: int) -> int:
        self.requests.append((minimum, maximum))
        if self._position >= len(self._values):
            raise ValueError(
                f"ScriptedSampler exhausted after {len(self._values)} values "
                f"(requested range [{minimum}, {maximum}])"
            )
        value = self._values[self._position]
        self._position += 1
        if not minimum <= value <= maximum:
            raise ValueError(f"Scripted value {value} outside requested range [{minimum}, {maximum}]")
        return value


def uniform_int(sampler: IntSampler, minimum: int, maximum: int) -> int:
    """Sample from ``[minimum, maximum]``; an empty range collapses to ``minimum``."""
    if maximum < minimum:
        maximum = minimum
    return sampler.uniform_int(minimum, maximum)


def random_direction(sampler: IntSampler, exclude: Optional[Direction] = None) -> Direction:
    """Pick one of the four directions, resampling while it equals ``exclude``.

    Only ``exclude`` itself is rejected, not its opposite.
    """
    while True:
        direction = DIRECTIONS[sampler.uniform_int(0, len(DIRECTIONS) - 1)]
        if exclude is None or direction is not exclude:
            return direction
