"""Tests for src/console_rpg/engine/action_dispatcher.py and the game systems."""
from __future__ import annotations

import pytest

from console_rpg.errors import PersistenceError
from console_rpg.models.action import Action, ActionType, EventType
from console_rpg.models.monster import Beast, Goblin


def _events(result) -> list[str]:
    return [e["event_type"] for e in result.events]


class TestMovement:
    def test_move_north(self, dispatcher, small_world):
        result = dispatcher.dispatch_label("Go North", 1)
        assert result.success
        assert result.value.name == "Yard"
        assert small_world["players"].get(1).room_id == 2

    def test_blocked_direction_changes_nothing(self, dispatcher, small_world):
        before = small_world["players"].get(1)
        result = dispatcher.dispatch_label("Go South", 1)
        assert not result.success
        assert "no exit" in result.outcome_description
        assert small_world["players"].get(1) == before

    def test_arrival_warns_about_monsters(self, dispatcher, small_world):
        small_world["monsters"].save(Beast(id=5, name="Wolf", health=10, room_id=2))
        result = dispatcher.dispatch_label("Go North", 1)
        assert "Wolf" in result.outcome_description

    def test_unknown_label(self, dispatcher):
        result = dispatcher.dispatch_label("Dance", 1)
        assert not result.success
        assert "Unknown action" in result.outcome_description

    def test_unknown_player(self, dispatcher):
        result = dispatcher.dispatch_label("Go North", 99)
        assert not result.success
        assert "Player 99" in result.outcome_description


class TestAttack:
    def test_monster_survives_and_counters(self, dispatcher, small_world):
        result = dispatcher.dispatch_label("Attack Monster", 1)
        assert result.success
        assert _events(result) == [EventType.ATTACK.value, EventType.COUNTER_ATTACK.value]
        assert small_world["monsters"].get(1).health == 2
        assert small_world["players"].get(1).health == 19

    def test_killing_blow_awards_xp_and_loot(self, dispatcher, small_world, armor):
        dispatcher.dispatch_label("Attack Monster", 1)
        result = dispatcher.dispatch_label("Attack Monster", 1)
        assert result.success
        assert result.xp_gained == 50
        assert EventType.COUNTER_ATTACK.value not in _events(result)
        assert small_world["monsters"].get(1) is None

        hero = small_world["players"].get(1)
        assert hero.experience == 50
        assert hero.health == 19
        assert hero.inventory.find(armor.id) == armor

    def test_no_monsters(self, dispatcher, small_world):
        small_world["monsters"].delete(1)
        result = dispatcher.dispatch_label("Attack Monster", 1)
        assert not result.success
        assert "no monsters" in result.outcome_description

    def test_several_monsters_need_a_target(self, dispatcher, small_world):
        small_world["monsters"].save(Goblin(id=2, name="Second Goblin", health=5, armor_class=2, room_id=1))
        result = dispatcher.dispatch_label("Attack Monster", 1)
        assert not result.success
        assert [m.id for m in result.value] == [1, 2]

        result = dispatcher.dispatch_label("Attack Monster", 1, target_id=2)
        assert result.success
        assert small_world["monsters"].get(2).health == 2
        assert small_world["monsters"].get(1).health == 5

    def test_only_the_target_counter_attacks(self, dispatcher, small_world):
        small_world["monsters"].save(Beast(id=2, name="Wolf", health=50, aggression_level=10, room_id=1))
        dispatcher.dispatch_label("Attack Monster", 1, target_id=1)
        assert small_world["players"].get(1).health == 19

    def test_game_over(self, dispatcher, small_world):
        hero = small_world["players"].get(1)
        hero.health = 1
        small_world["players"].save(hero)
        result = dispatcher.dispatch_label("Attack Monster", 1)
        assert result.game_over
        assert EventType.PLAYER_DEFEAT.value in _events(result)


class TestUseAbility:
    def test_fireball(self, dispatcher, small_world):
        result = dispatcher.dispatch(
            Action(ActionType.USE_ABILITY, 1, parameters={"ability_id": 2})
        )
        assert result.success
        assert small_world["monsters"].get(1) is None
        assert result.xp_gained == 50

    def test_unlearned_ability(self, dispatcher, small_world):
        result = dispatcher.dispatch(
            Action(ActionType.USE_ABILITY, 1, parameters={"ability_id": 1})
        )
        assert not result.success
        assert "haven't learned" in result.outcome_description
        assert small_world["monsters"].get(1).health == 5

    def test_ability_choice_required(self, dispatcher):
        result = dispatcher.dispatch_label("Use Ability", 1)
        assert not result.success
        assert "Select an ability" in result.outcome_description

    def test_no_abilities(self, dispatcher, small_world):
        hero = small_world["players"].get(1)
        hero.ability_ids = set()
        small_world["players"].save(hero)
        result = dispatcher.dispatch_label("Use Ability", 1)
        assert not result.success
        assert "any abilities" in result.outcome_description


class TestInventoryActions:
    def test_equip_swaps_previous_into_backpack(self, dispatcher, small_world, sword, armor):
        dispatcher.dispatch_label("Attack Monster", 1)
        dispatcher.dispatch_label("Attack Monster", 1)

        result = dispatcher.dispatch_label("Equip Item", 1)
        assert result.success
        hero = small_world["players"].get(1)
        assert hero.equipment.armor == armor
        assert hero.equipment.weapon == sword
        assert hero.inventory.items == []

    def test_equip_with_empty_backpack(self, dispatcher):
        result = dispatcher.dispatch_label("Equip Item", 1)
        assert not result.success

    def test_view_inventory_and_stats(self, dispatcher):
        inventory = dispatcher.dispatch_label("View Inventory", 1)
        assert "Short Sword" in inventory.outcome_description
        stats = dispatcher.dispatch_label("View Character Stats", 1)
        assert "Health: 20/20" in stats.outcome_description

    def test_view_map(self, dispatcher):
        result = dispatcher.dispatch_label("View Map", 1)
        assert result.success
        assert result.value["current_room_id"] == 1
        assert result.value["monster_room_ids"] == {1}


class TestPersistenceFailure:
    def test_failed_save_rolls_back_whole_action(self, dispatcher, small_world, monkeypatch):
        def broken_delete(monster_id):
            raise PersistenceError("disk full")

        dispatcher.dispatch_label("Attack Monster", 1)
        monkeypatch.setattr(small_world["monsters"], "delete", broken_delete)
        result = dispatcher.dispatch_label("Attack Monster", 1)

        assert not result.success
        hero = small_world["players"].get(1)
        assert hero.experience == 0
        assert hero.inventory is None
        assert small_world["monsters"].get(1).health == 2


class TestAvailableActions:
    def test_lists_exits_combat_and_inventory(self, dispatcher, small_world):
        labels = {a["action_type"] for a in dispatcher.available_actions(small_world["players"].get(1))}
        assert {"Go North", "View Map", "Attack Monster", "Use Ability", "View Inventory"} <= labels
        assert "Go South" not in labels
        assert "Equip Item" not in labels
