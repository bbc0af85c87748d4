"""Turns a grown chain into a playable one: ladders in, dead-end door out."""

from __future__ import annotations

from typing import List, Sequence

from dungeon_models import Room, TileType


def place_ladder_up(room: Room) -> Room:
    row, column = room.center_offset()
    return room.with_tile_type(row, column, TileType.LADDER_UP)


def place_ladder_down(room: Room) -> Room:
    """Carve the exit ladder and wall up the door leading nowhere."""
    row, column = room.center_offset()
    if room.tile_at(row, column).type is TileType.LADDER_UP:
        # Single-room chain: keep the entry ladder and put the exit beside it.
        column -= 1
    sealed = room.replace_tile_types(TileType.DOOR, TileType.WALL)
    return sealed.with_tile_type(row, column, TileType.LADDER_DOWN)


def finalize_chain(rooms: Sequence[Room]) -> List[Room]:
    """Return a new chain with the first and last rooms finalized.

    Middle rooms are passed through untouched.
    """
    if not rooms:
        raise ValueError("Cannot finalize an empty room chain")

    first = place_ladder_up(rooms[0])
    if len(rooms) == 1:
        return [place_ladder_down(first)]

    last = place_ladder_down(rooms[-1])
    return [first, *rooms[1:-1], last]
