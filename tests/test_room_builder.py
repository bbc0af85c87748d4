import itertools

import pytest

from dungeon_config import DungeonConfig
from dungeon_geometry import DIRECTIONS, Direction, Point
from dungeon_models import TileType
from room_builder import build_room_candidate, door_cell, sample_door_position
from sampling import ScriptedSampler


def _candidate(anchor, incoming, next_dir, width=4, height=4, door_position=1):
    config = DungeonConfig()
    sampler = ScriptedSampler([width, height, next_dir.index, door_position])
    return build_room_candidate(anchor, incoming, config, sampler)


def test_first_room_matches_scripted_values():
    config = DungeonConfig()
    sampler = ScriptedSampler([3, 2, 1, 1])

    candidate = build_room_candidate(Point(0, 0), None, config, sampler)
    room = candidate.room

    assert (room.width, room.height) == (3, 2)
    assert room.entrance == Point(0, 0)
    assert room.last_dir is None
    assert room.next_dir is Direction.RIGHT
    assert sorted(room.floor_points()) == sorted(
        Point(x, y) for x in range(0, 3) for y in range(0, 2)
    )
    assert candidate.door_cell == (2, 4)
    assert candidate.door == Point(3, 1)
    assert candidate.next_anchor() == Point(4, 1)
    assert candidate.next_incoming() is Direction.LEFT
    # Height 2 leaves no span for a side door, so the draw is pinned to 1.
    assert sampler.requests == [(3, 6), (2, 5), (0, 3), (1, 1)]


def test_room_entered_from_up_grows_downward():
    candidate = _candidate(Point(10, 10), Direction.UP, Direction.DOWN, width=3, height=3)

    ys = {point.y for point in candidate.interior}
    xs = {point.x for point in candidate.interior}

    assert ys == {10, 9, 8}
    assert xs == {10, 11, 12}
    assert candidate.door == Point(10, 7)
    assert candidate.next_anchor() == Point(10, 6)


def test_room_entered_from_right_grows_leftward():
    candidate = _candidate(Point(0, 0), Direction.RIGHT, Direction.LEFT, width=3, height=3)

    assert {point.x for point in candidate.interior} == {0, -1, -2}
    assert candidate.door == Point(-3, 1)
    assert candidate.next_anchor() == Point(-4, 1)


@pytest.mark.parametrize(
    "next_dir,expected_anchor",
    [
        # Anchor (5, 5), 4x4 interior growing positively, door offset 2.
        (Direction.UP, Point(5 + 2 - 1, 5 + 4 + 1)),
        (Direction.RIGHT, Point(5 + 4 + 1, 5 + 2)),
        (Direction.DOWN, Point(5 + 2 - 1, 5 - 2)),
        (Direction.LEFT, Point(5 - 2, 5 + 2)),
    ],
)
def test_next_anchor_offsets_for_positive_growth(next_dir, expected_anchor):
    candidate = _candidate(Point(5, 5), None, next_dir, width=4, height=4, door_position=2)

    assert candidate.next_anchor() == expected_anchor


def test_next_anchor_for_negative_growth_uses_far_walls():
    down = _candidate(Point(0, 0), Direction.UP, Direction.DOWN, width=4, height=3, door_position=2)
    left = _candidate(Point(0, 0), Direction.RIGHT, Direction.LEFT, width=4, height=3, door_position=1)

    assert down.next_anchor() == Point(1, -3 - 1)
    assert left.next_anchor() == Point(-4 - 1, 1)


DIRECTION_PAIRS = [
    (incoming, next_dir)
    for incoming, next_dir in itertools.product((None, *DIRECTIONS), DIRECTIONS)
    if next_dir is not incoming
]


@pytest.mark.parametrize("incoming,next_dir", DIRECTION_PAIRS)
def test_single_door_faces_next_direction(incoming, next_dir):
    candidate = _candidate(Point(0, 0), incoming, next_dir)
    room = candidate.room

    assert room.count(TileType.DOOR) == 1
    assert room.find(TileType.DOOR) == [candidate.door_cell]
    assert candidate.door.step(next_dir.opposite()) in room.floor_points()
    assert candidate.door.step(next_dir) not in room.tile_points()


@pytest.mark.parametrize("incoming,next_dir", DIRECTION_PAIRS)
def test_next_room_starts_flush_against_door(incoming, next_dir):
    candidate = _candidate(Point(0, 0), incoming, next_dir)
    follow_dir = next(d for d in DIRECTIONS if d is not candidate.next_incoming())

    follower = _candidate(candidate.next_anchor(), candidate.next_incoming(), follow_dir)

    assert candidate.door in follower.room.tile_points()
    assert not set(follower.interior) & set(candidate.room.tile_points())
    assert candidate.next_anchor() in follower.interior


@pytest.mark.parametrize(
    "next_dir,horizontal,vertical,expected",
    [
        (Direction.UP, 1, 1, (5, 2)),
        (Direction.DOWN, 1, 1, (0, 2)),
        (Direction.DOWN, 1, -1, (5, 2)),
        (Direction.RIGHT, 1, 1, (3, 5)),
        (Direction.LEFT, 1, 1, (3, 0)),
        (Direction.LEFT, -1, 1, (3, 5)),
    ],
)
def test_door_cell_picks_near_or_far_wall(next_dir, horizontal, vertical, expected):
    assert door_cell(next_dir, 2, 4, 4, horizontal, vertical) == expected


def test_sample_door_position_uses_span_of_target_wall():
    sampler = ScriptedSampler([4, 2])

    assert sample_door_position(sampler, Direction.UP, 6, 5) == 4
    assert sample_door_position(sampler, Direction.LEFT, 6, 5) == 2
    assert sampler.requests == [(1, 4), (1, 3)]
