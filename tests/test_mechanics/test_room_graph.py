"""Tests for src/console_rpg/mechanics/room_graph.py."""
from __future__ import annotations

import pytest

from console_rpg.errors import InvalidDirectionError, NotFoundError, OccupiedCoordinateError
from console_rpg.mechanics.room_graph import Direction, RoomGraph, exits
from console_rpg.models.room import Room


@pytest.fixture
def graph() -> RoomGraph:
    return RoomGraph([
        Room(id=1, name="Hall", x=0, y=0, north_id=2),
        Room(id=2, name="Yard", x=0, y=1, south_id=1),
    ])


class TestDirection:
    @pytest.mark.parametrize("text, expected", [
        ("north", Direction.NORTH), ("N", Direction.NORTH), (" east ", Direction.EAST), ("w", Direction.WEST),
    ])
    def test_parse(self, text, expected):
        assert Direction.parse(text) == expected

    def test_parse_rejects_unknown(self):
        with pytest.raises(InvalidDirectionError):
            Direction.parse("up")

    @pytest.mark.parametrize("direction, offset", [
        (Direction.NORTH, (0, 1)), (Direction.SOUTH, (0, -1)),
        (Direction.EAST, (1, 0)), (Direction.WEST, (-1, 0)),
    ])
    def test_offsets(self, direction, offset):
        assert direction.offset == offset

    def test_opposites_are_symmetric(self):
        for d in Direction:
            assert d.opposite.opposite == d


class TestMove:
    def test_follows_edge(self, graph, hero):
        dest = graph.move(hero, graph.get(1), Direction.NORTH)
        assert dest.id == 2
        assert hero.room_id == 2

    def test_missing_edge_leaves_player(self, graph, hero):
        with pytest.raises(InvalidDirectionError):
            graph.move(hero, graph.get(1), Direction.SOUTH)
        assert hero.room_id == 1

    def test_dangling_edge(self, hero):
        graph = RoomGraph([Room(id=1, name="Hall", east_id=42)])
        with pytest.raises(NotFoundError):
            graph.move(hero, graph.get(1), Direction.EAST)
        assert hero.room_id == 1


class TestCreateRoom:
    def test_links_both_ways(self, graph):
        new = graph.create_room(1, Direction.EAST, "Kitchen")
        assert (new.x, new.y) == (1, 0)
        assert graph.get(1).east_id == new.id
        assert new.west_id == 1
        assert new.id == 3

    def test_occupied_coordinate(self, graph):
        with pytest.raises(OccupiedCoordinateError):
            graph.create_room(2, Direction.SOUTH, "Clash")
        assert len(graph) == 2

    def test_edges_stay_symmetric(self, graph):
        graph.create_room(2, Direction.WEST, "Garden")
        graph.create_room(1, Direction.SOUTH, "Cellar")
        for room in graph.rooms.values():
            for direction, target_id in exits(room).items():
                assert getattr(graph.get(target_id), direction.opposite.edge_field) == room.id


class TestLayout:
    def test_bounds(self, graph):
        graph.create_room(1, Direction.WEST, "Shed")
        layout = graph.layout()
        assert (layout.min_x, layout.max_x, layout.min_y, layout.max_y) == (-1, 0, 0, 1)
        assert layout.width == 2
        assert layout.cells[(-1, 0)].name == "Shed"

    def test_empty(self):
        assert RoomGraph().layout().cells == {}
