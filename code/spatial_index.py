"""Spatial index for tracking tile occupancy by placed rooms."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Dict, Optional, Tuple

from dungeon_geometry import Point
from dungeon_models import Room


class SpatialIndex:
    """Caches which rooms cover each coordinate, walls included."""

    def __init__(self, rooms: Iterable[Room] = ()) -> None:
        self._point_to_rooms: Dict[Point, Tuple[int, ...]] = {}
        self._room_count = 0
        for room in rooms:
            self.add_room(room)

    def __len__(self) -> int:
        return self._room_count

    def add_room(self, room: Room) -> int:
        """Record every tile of ``room`` and return its index."""
        room_index = self._room_count
        for point in room.tile_points():
            owners = self._point_to_rooms.get(point, ())
            if room_index not in owners:
                self._point_to_rooms[point] = owners + (room_index,)
        self._room_count += 1
        return room_index

    def get_rooms_at(self, point: Point) -> Tuple[int, ...]:
        """Return indices of rooms whose tiles include ``point``."""
        return self._point_to_rooms.get(point, ())

    def is_occupied(self, point: Point) -> bool:
        return point in self._point_to_rooms

    def first_collision(self, points: Iterable[Point]) -> Optional[Point]:
        """Return the first of ``points`` already covered by a room, if any."""
        for point in points:
            if point in self._point_to_rooms:
                return point
        return None

    def is_area_clear(self, points: Iterable[Point]) -> bool:
        return self.first_collision(points) is None

    def clear(self) -> None:
        """Remove all cached data."""
        self._point_to_rooms.clear()
        self._room_count = 0
