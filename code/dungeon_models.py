"""Core dataclasses used by the dungeon generator."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from dungeon_geometry import Direction, Point


class TileType(Enum):
    """Tile kinds. The string values are what renderers receive."""

    WALL = "wall"
    FLOOR = "floor"
    DOOR = "door"
    LADDER_UP = "ladderUp"
    LADDER_DOWN = "ladderDown"


class RoomType(Enum):
    """Role tag of a room within the chain. Informational only."""
    ENTRANCE = 0
    EXIT = 1


@dataclass(frozen=True)
class Tile:
    """A single grid cell of a room."""

    point: Point
    type: TileType

    def with_type(self, tile_type: TileType) -> Tile:
        return replace(self, type=tile_type)

    def to_dict(self) -> Dict[str, Any]:
        return {"point": {"x": self.point.x, "y": self.point.y}, "type": self.type.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Tile:
        point = data["point"]
        return cls(Point(int(point["x"]), int(point["y"])), TileType(data["type"]))


TileGrid = Tuple[Tuple[Tile, ...], ...]


@dataclass(frozen=True)
class Room:
    """A walled room placed on the grid.

    ``tiles`` holds ``height + 2`` rows of ``width + 2`` tiles: the interior
    floor surrounded by a one tile thick border. Row 0 and column 0 are the
    border on the side of the entrance anchor.
    """

    entrance: Point
    width: int
    height: int
    tiles: TileGrid
    type: RoomType = RoomType.ENTRANCE
    last_dir: Optional[Direction] = None
    next_dir: Optional[Direction] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Room dimensions must be positive, got {self.width}x{self.height}")
        tiles = tuple(tuple(row) for row in self.tiles)
        if len(tiles) != self.height + 2 or any(len(row) != self.width + 2 for row in tiles):
            raise ValueError(
                f"Room tile grid must be {self.height + 2}x{self.width + 2} for a "
                f"{self.width}x{self.height} interior"
            )
        object.__setattr__(self, "tiles", tiles)

    def iter_tiles(self) -> Iterator[Tile]:
        for row in self.tiles:
            yield from row

    def tile_at(self, row: int, column: int) -> Tile:
        return self.tiles[row][column]

    def tile_points(self) -> List[Point]:
        """Every coordinate covered by the room, border included."""
        return [tile.point for tile in self.iter_tiles()]

    def floor_points(self) -> List[Point]:
        """Coordinates of the interior, whatever markers were carved into it."""
        return [
            tile.point
            for row in self.tiles[1:-1]
            for tile in row[1:-1]
        ]

    def count(self, tile_type: TileType) -> int:
        return sum(1 for tile in self.iter_tiles() if tile.type is tile_type)

    def find(self, tile_type: TileType) -> List[Tuple[int, int]]:
        """Return ``(row, column)`` grid positions holding ``tile_type``."""
        return [
            (row_idx, col_idx)
            for row_idx, row in enumerate(self.tiles)
            for col_idx, tile in enumerate(row)
            if tile.type is tile_type
        ]

    def with_tile_type(self, row: int, column: int, tile_type: TileType) -> Room:
        """Return a copy of this room with one tile retyped."""
        rows = [list(r) for r in self.tiles]
        rows[row][column] = rows[row][column].with_type(tile_type)
        return replace(self, tiles=tuple(tuple(r) for r in rows))

    def replace_tile_types(self, old: TileType, new: TileType) -> Room:
        """Return a copy of this room with every ``old`` tile turned into ``new``."""
        tiles = tuple(
            tuple(tile.with_type(new) if tile.type is old else tile for tile in row)
            for row in self.tiles
        )
        return replace(self, tiles=tiles)

    def center_offset(self) -> Tuple[int, int]:
        """Grid ``(row, column)`` used for ladder markers."""
        return math.ceil(self.height / 2) + 1, math.ceil(self.width / 2) + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entrance": {"x": self.entrance.x, "y": self.entrance.y},
            "width": self.width,
            "height": self.height,
            "tiles": [[tile.to_dict() for tile in row] for row in self.tiles],
            "type": self.type.name.lower(),
            "lastDir": self.last_dir.name.lower() if self.last_dir is not None else None,
            "nextDir": self.next_dir.name.lower() if self.next_dir is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Room:
        entrance = data["entrance"]
        last_dir = data.get("lastDir")
        next_dir = data.get("nextDir")
        return cls(
            entrance=Point(int(entrance["x"]), int(entrance["y"])),
            width=int(data["width"]),
            height=int(data["height"]),
            tiles=tuple(tuple(Tile.from_dict(tile) for tile in row) for row in data["tiles"]),
            type=RoomType[str(data.get("type", "entrance")).upper()],
            last_dir=Direction.from_name(last_dir) if last_dir is not None else None,
            next_dir=Direction.from_name(next_dir) if next_dir is not None else None,
        )


def rooms_to_json(rooms: Sequence[Room], indent: Optional[int] = None) -> str:
    """Serialize a room chain for a rendering collaborator."""
    return json.dumps([room.to_dict() for room in rooms], indent=indent)


def rooms_from_json(payload: str) -> List[Room]:
    return [Room.from_dict(item) for item in json.loads(payload)]
