"""Tests for src/console_rpg/mechanics/combat.py."""
from __future__ import annotations

import pytest

from console_rpg.mechanics.combat import (
    UNARMED_DAMAGE,
    health_bar,
    mitigation,
    receive_attack,
    weapon_attack,
)
from console_rpg.models.item import Item, ItemType
from console_rpg.models.monster import Bandit


class TestMitigation:
    def test_unequipped_player_has_none(self, hero):
        assert mitigation(hero) == 0

    def test_player_sums_armor_and_weapon_defense(self, hero, armor):
        parrying_blade = Item(id=20, name="Parrying Blade", item_type=ItemType.WEAPON, attack=3, defense=1)
        hero.equipment.armor = armor
        hero.equipment.weapon = parrying_blade
        assert mitigation(hero) == 3

    def test_monster_uses_armor_class(self, goblin):
        assert mitigation(goblin) == 2


class TestReceiveAttack:
    def test_damage_reduced_by_mitigation(self, goblin):
        assert receive_attack(goblin, 5) == 3
        assert goblin.health == 2

    def test_never_heals_when_mitigation_exceeds_damage(self, goblin):
        assert receive_attack(goblin, 1) == 0
        assert goblin.health == 5

    @pytest.mark.parametrize("raw, expected_health", [(0, 20), (2, 18), (25, -5)])
    def test_player_health_can_go_negative(self, hero, raw, expected_health):
        receive_attack(hero, raw)
        assert hero.health == expected_health


class TestWeaponAttack:
    def test_with_weapon(self, hero, goblin, sword):
        hero.equipment.weapon = sword
        damage, text = weapon_attack(hero, goblin)
        assert damage == 3
        assert goblin.health == 2
        assert "Short Sword" in text

    def test_unarmed_uses_fists(self, hero):
        bandit = Bandit(id=2, name="Bandit", health=10, armor_class=0)
        damage, text = weapon_attack(hero, bandit)
        assert damage == UNARMED_DAMAGE
        assert bandit.health == 10 - UNARMED_DAMAGE
        assert "fists" in text

    def test_fists_blocked_by_armor(self, hero, goblin):
        damage, _ = weapon_attack(hero, goblin)
        assert damage == 0
        assert goblin.health == 5


class TestHealthBar:
    def test_full(self):
        assert health_bar(20, 20) == "[" + "=" * 20 + "]"

    def test_half(self):
        assert health_bar(50, 100) == "[" + "=" * 10 + "-" * 10 + "]"

    def test_negative_health_is_empty(self):
        assert health_bar(-5, 100) == "[" + "-" * 20 + "]"

    def test_zero_max(self):
        assert health_bar(0, 0) == "[" + "-" * 20 + "]"
