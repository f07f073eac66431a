"""Room adjacency graph: an arena of rooms keyed by id.

Edges are optional room ids resolved through the arena when used. The
north/south and east/west symmetry of edges is established in
:meth:`RoomGraph.create_room`, the only place that links rooms.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from console_rpg.errors import InvalidDirectionError, NotFoundError, OccupiedCoordinateError
from console_rpg.models.character import Player
from console_rpg.models.room import Room

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSET[self]

    @property
    def edge_field(self) -> str:
        return f"{self.value}_id"

    @classmethod
    def parse(cls, text: str) -> Direction:
        key = text.strip().lower()
        key = _SHORT.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidDirectionError(text) from None


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_OFFSET = {
    Direction.NORTH: (0, 1),
    Direction.SOUTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_SHORT = {"n": "north", "s": "south", "e": "east", "w": "west"}


def exit_id(room: Room, direction: Direction) -> int | None:
    return getattr(room, direction.edge_field)


def exits(room: Room) -> dict[Direction, int]:
    """Map of the room's open exits to neighbor ids."""
    return {d: exit_id(room, d) for d in Direction if exit_id(room, d) is not None}


@dataclass
class MapLayout:
    min_x: int
    max_x: int
    min_y: int
    max_y: int
    cells: dict[tuple[int, int], Room]

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


class RoomGraph:
    def __init__(self, rooms: Iterable[Room] = ()) -> None:
        self.rooms: dict[int, Room] = {r.id: r for r in rooms}

    def __contains__(self, room_id: object) -> bool:
        return room_id in self.rooms

    def __len__(self) -> int:
        return len(self.rooms)

    def get(self, room_id: int) -> Room:
        room = self.rooms.get(room_id)
        if room is None:
            raise NotFoundError("Room", room_id)
        return room

    def add(self, room: Room) -> None:
        self.rooms[room.id] = room

    def neighbor(self, room: Room, direction: Direction) -> Room | None:
        target_id = exit_id(room, direction)
        if target_id is None:
            return None
        return self.get(target_id)

    def room_at(self, x: int, y: int) -> Room | None:
        for room in self.rooms.values():
            if room.x == x and room.y == y:
                return room
        return None

    def move(self, player: Player, room: Room, direction: Direction) -> Room:
        """Move ``player`` out of ``room``. Raises if there is no exit that way."""
        target_id = exit_id(room, direction)
        if target_id is None:
            raise InvalidDirectionError(direction.value)
        if target_id not in self.rooms:
            logger.warning("Attempted to move to non-existent room %s", target_id)
            raise NotFoundError("Room", target_id)
        player.room_id = target_id
        return self.rooms[target_id]

    def next_id(self) -> int:
        return max(self.rooms, default=0) + 1

    def create_room(
        self,
        source_id: int,
        direction: Direction,
        name: str,
        description: str = "",
        room_id: int | None = None,
    ) -> Room:
        """Create a room one step from ``source_id`` and link both ways.

        Raises OccupiedCoordinateError when a room already sits at the
        target coordinates; the graph is left untouched in that case.
        """
        source = self.get(source_id)
        dx, dy = direction.offset
        x, y = source.x + dx, source.y + dy
        if self.room_at(x, y) is not None:
            raise OccupiedCoordinateError(x, y)

        new_room = Room(
            id=room_id if room_id is not None else self.next_id(),
            name=name,
            description=description,
            x=x,
            y=y,
        )
        setattr(source, direction.edge_field, new_room.id)
        setattr(new_room, direction.opposite.edge_field, source.id)
        self.add(new_room)
        return new_room

    def layout(self) -> MapLayout:
        """Coordinate grid of all rooms, for map rendering."""
        if not self.rooms:
            return MapLayout(0, 0, 0, 0, {})
        xs = [r.x for r in self.rooms.values()]
        ys = [r.y for r in self.rooms.values()]
        cells = {r.coordinates: r for r in self.rooms.values()}
        return MapLayout(min(xs), max(xs), min(ys), max(ys), cells)
