"""Tests for the tagged unions and action parsing in src/console_rpg/models/."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from console_rpg.models.ability import Combat, Heal, parse_ability
from console_rpg.models.action import Action, ActionResult, ActionType
from console_rpg.models.character import Player
from console_rpg.models.monster import Bandit, Goblin, parse_monster


class TestMonsterUnion:
    def test_goblin(self):
        monster = parse_monster({"id": 1, "kind": "goblin", "name": "g", "health": 3, "sneakiness": 4})
        assert isinstance(monster, Goblin)
        assert monster.sneakiness == 4

    def test_extra_columns_ignored(self):
        monster = parse_monster({"id": 2, "kind": "bandit", "name": "b", "health": 3, "sneakiness": 0})
        assert isinstance(monster, Bandit)

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            parse_monster({"id": 3, "kind": "dragon", "name": "d", "health": 3})

    @pytest.mark.parametrize("health, dead", [(1, False), (0, True), (-4, True)])
    def test_is_dead(self, health, dead):
        assert Goblin(id=1, name="g", health=health).is_dead is dead


class TestAbilityUnion:
    @pytest.mark.parametrize("kind, cls", [("heal", Heal), ("combat", Combat)])
    def test_kinds(self, kind, cls):
        assert isinstance(parse_ability({"id": 1, "kind": kind, "name": "x"}), cls)


class TestPlayer:
    def test_defaults(self):
        player = Player(id=1, name="p")
        assert (player.health, player.max_health, player.level, player.experience) == (100, 100, 1, 0)
        assert player.equipment.weapon is None
        assert player.inventory is None

    @pytest.mark.parametrize("health, dead", [(5, False), (0, True), (-3, True)])
    def test_is_dead(self, health, dead):
        assert Player(id=1, name="p", health=health).is_dead is dead

    def test_ensure_inventory_is_stable(self):
        player = Player(id=1, name="p")
        assert player.ensure_inventory() is player.ensure_inventory()


class TestAction:
    def test_parse_label(self):
        action = Action.parse("Go East", 7)
        assert action.action_type == ActionType.GO_EAST
        assert action.action_type.direction == "east"
        assert action.actor_id == 7

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Action.parse("Fly", 1)

    def test_non_movement_has_no_direction(self):
        assert ActionType.ATTACK.direction is None

    def test_result_description_defaults_to_message(self):
        result = ActionResult.fail("a", "Nope")
        assert result.outcome_description == "Nope"
        assert result.success is False
