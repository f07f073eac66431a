"""Tests for src/console_rpg/cli/map_display.py and display helpers."""
from __future__ import annotations

import pytest

from console_rpg.cli.display import health_color
from console_rpg.cli.map_display import MapDisplay
from console_rpg.mechanics.room_graph import Direction, RoomGraph
from console_rpg.models.room import Room


class TestMapDisplay:
    def test_marks_player_and_monsters(self):
        graph = RoomGraph([Room(id=1, name="Hall", x=0, y=0)])
        graph.create_room(1, Direction.EAST, "Kitchen")
        text = MapDisplay().build(graph.layout(), current_room_id=1, monster_room_ids={2}).plain
        first_line = text.splitlines()[0]
        assert first_line.startswith("[@]-[M]")

    def test_north_is_drawn_on_top(self):
        graph = RoomGraph([Room(id=1, name="Hall", x=0, y=0)])
        graph.create_room(1, Direction.NORTH, "Tower")
        lines = MapDisplay().build(graph.layout(), current_room_id=1).plain.splitlines()
        assert lines[0].startswith("[ ]")
        assert lines[1].startswith(" | ")
        assert lines[2].startswith("[@]")

    def test_empty(self):
        assert "No rooms" in MapDisplay().build(RoomGraph().layout()).plain


class TestHealthColor:
    @pytest.mark.parametrize("current, expected", [(100, "green"), (71, "green"), (70, "yellow"), (31, "yellow"), (30, "red"), (-5, "red")])
    def test_thresholds(self, current, expected):
        assert health_color(current, 100) == expected
