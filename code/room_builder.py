"""Construction of a single walled room candidate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from dungeon_config import DungeonConfig
from dungeon_geometry import Direction, Point, growth_signs
from dungeon_models import Room, RoomType, Tile, TileType
from sampling import IntSampler, random_direction, uniform_int


@dataclass(frozen=True)
class RoomCandidate:
    """A sampled room that has not been checked for collisions yet."""

    room: Room
    door: Point
    door_cell: Tuple[int, int]  # (row, column) in the room's tile grid
    door_position: int
    next_dir: Direction

    @property
    def interior(self) -> List[Point]:
        return self.room.floor_points()

    def next_anchor(self) -> Point:
        """Anchor of the following room, directly beyond the door."""
        return self.door.step(self.next_dir)

    def next_incoming(self) -> Direction:
        """The following room is entered through the wall facing back at this door."""
        return self.next_dir.opposite()


def sample_door_position(sampler: IntSampler, next_dir: Direction, width: int, height: int) -> int:
    """Door offset along the wall it sits on, never on the first border cell."""
    if next_dir.is_vertical:
        return uniform_int(sampler, 1, width - 2)
    return uniform_int(sampler, 1, height - 2)


def door_cell(
    next_dir: Direction,
    door_position: int,
    width: int,
    height: int,
    horizontal: int,
    vertical: int,
) -> Tuple[int, int]:
    """Locate the door in the tile grid as ``(row, column)``.

    Row 0 / column 0 are the near border (behind the anchor) and the last
    row / column the far border. The door goes on the far side when the next
    direction points the same way the room grows, otherwise on the near side.
    """
    if next_dir.is_vertical:
        row = height + 1 if next_dir.dy == vertical else 0
        return row, door_position
    column = width + 1 if next_dir.dx == horizontal else 0
    return door_position + 1, column


def build_tile_grid(
    anchor: Point,
    width: int,
    height: int,
    horizontal: int,
    vertical: int,
    door: Tuple[int, int],
) -> Tuple[Tuple[Tile, ...], ...]:
    rows = []
    for row in range(height + 2):
        y = anchor.y + (row - 1) * vertical
        cells = []
        for column in range(width + 2):
            x = anchor.x + (column - 1) * horizontal
            on_border = row in (0, height + 1) or column in (0, width + 1)
            if (row, column) == door:
                tile_type = TileType.DOOR
            elif on_border:
                tile_type = TileType.WALL
            else:
                tile_type = TileType.FLOOR
            cells.append(Tile(Point(x, y), tile_type))
        rows.append(tuple(cells))
    return tuple(rows)


def build_room_candidate(
    anchor: Point,
    incoming: Optional[Direction],
    config: DungeonConfig,
    sampler: IntSampler,
) -> RoomCandidate:
    """Sample dimensions, exit direction and door for a room grown from ``anchor``.

    Sampling order is fixed (width, height, direction, door position) so a
    scripted sampler reproduces the same room.
    """
    width = config.room_width.sample(sampler)
    height = config.room_height.sample(sampler)
    horizontal, vertical = growth_signs(incoming)

    next_dir = random_direction(sampler, exclude=incoming)
    door_position = sample_door_position(sampler, next_dir, width, height)
    cell = door_cell(next_dir, door_position, width, height, horizontal, vertical)

    tiles = build_tile_grid(anchor, width, height, horizontal, vertical, cell)
    room = Room(
        entrance=anchor,
        width=width,
        height=height,
        tiles=tiles,
        type=RoomType.ENTRANCE,
        last_dir=incoming,
        next_dir=next_dir,
    )
    door_point = tiles[cell[0]][cell[1]].point
    return RoomCandidate(
        room=room,
        door=door_point,
        door_cell=cell,
        door_position=door_position,
        next_dir=next_dir,
    )
