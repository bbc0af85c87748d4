"""Geometry helpers for directions and integer grid points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Direction(Enum):
    """Cardinal directions with unit vectors on the tile grid.

    Declaration order matters: ``random_direction`` maps a sampled index 0..3
    onto ``tuple(Direction)``.
    """

    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

    @property
    def is_vertical(self) -> bool:
        return self.dx == 0

    @property
    def index(self) -> int:
        return DIRECTIONS.index(self)

    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))

    @classmethod
    def from_index(cls, index: int) -> Direction:
        try:
            return DIRECTIONS[index]
        except IndexError as exc:
            raise ValueError(f"Unsupported direction index {index}") from exc

    @classmethod
    def from_name(cls, name: str) -> Direction:
        try:
            return cls[name.upper()]
        except KeyError as exc:
            raise ValueError(f"Unsupported direction {name!r}") from exc


DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True, order=True)
class Point:
    """Integer grid coordinate."""

    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y

    def offset(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)

    def step(self, direction: Direction) -> Point:
        """Return the neighbouring point one tile towards ``direction``."""
        return Point(self.x + direction.dx, self.y + direction.dy)

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> Point:
        return cls(*value)


def growth_signs(incoming: Optional[Direction]) -> Tuple[int, int]:
    """Return the ``(horizontal, vertical)`` growth multipliers for a room.

    A room entered from ``UP`` grows towards negative y and a room entered from
    ``RIGHT`` grows towards negative x; every other case grows positively.
    """
    horizontal = -1 if incoming is Direction.RIGHT else 1
    vertical = -1 if incoming is Direction.UP else 1
    return horizontal, vertical
