"""Tests for src/console_rpg/cli/display.py."""
from __future__ import annotations

import io

import pytest
from rich.console import Console

from console_rpg.cli.display import Display
from console_rpg.models.action import ActionResult
from console_rpg.models.character import Player
from console_rpg.models.monster import Goblin
from console_rpg.models.room import Room


@pytest.fixture
def display():
    return Display(width=100, output=Console(file=io.StringIO(), width=100, color_system=None))


def _output(display: Display) -> str:
    return display.console.file.getvalue()


class TestNamesAreNotMarkup:
    def test_result_with_bracketed_name(self, display):
        result = ActionResult.ok("a1", "Attack", "You hit [bold]Gob[/i] for 3 damage.")
        display.show_result(result)
        assert "[bold]Gob[/i]" in _output(display)

    def test_rooms_table_with_bracketed_names(self, display):
        room = Room(id=1, name="[red]Vault", x=0, y=0)
        hero = Player(id=1, name="[Sir] Test", health=10, max_health=10, room_id=1)
        goblin = Goblin(id=1, name="Gob [the] Bold", health=3, room_id=1)
        display.show_rooms([(room, [hero], [goblin])])
        out = _output(display)
        assert "[red]Vault" in out
        assert "[Sir] Test" in out
        assert "Gob [the] Bold" in out

    def test_info_keeps_brackets(self, display):
        display.info("Character '[x]' created with id 3.")
        assert "[x]" in _output(display)
