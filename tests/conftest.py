import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from dungeon_config import DungeonConfig
from dungeon_geometry import Point
from dungeon_models import Room, RoomType
from room_builder import build_tile_grid
from sampling import ScriptedSampler


@pytest.fixture
def dungeon_config() -> DungeonConfig:
    return DungeonConfig(target_rooms=2, random_seed=0)


@pytest.fixture
def two_room_script() -> tuple:
    # A 3x2 room heading right, then a 4x3 room heading up. The first direction
    # draw for the second room (3 = LEFT) is its incoming side and gets redrawn.
    return (3, 2, 1, 1, 4, 3, 3, 0, 2)


@pytest.fixture
def make_sampler() -> Callable[[Iterable[int]], ScriptedSampler]:
    def _make_sampler(values: Iterable[int]) -> ScriptedSampler:
        return ScriptedSampler(values)

    return _make_sampler


@pytest.fixture
def make_room() -> Callable[..., Room]:
    """Build a plain walled room with its door on the near row."""

    def _make_room(
        x: int,
        y: int,
        width: int,
        height: int,
        *,
        door: tuple = (0, 1),
    ) -> Room:
        anchor = Point(x, y)
        return Room(
            entrance=anchor,
            width=width,
            height=height,
            tiles=build_tile_grid(anchor, width, height, 1, 1, door),
            type=RoomType.ENTRANCE,
        )

    return _make_room
