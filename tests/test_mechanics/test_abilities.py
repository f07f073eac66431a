"""Tests for src/console_rpg/mechanics/abilities.py."""
from __future__ import annotations

from console_rpg.mechanics.abilities import activate, describe_stats


class TestShove:
    def test_damages_through_mitigation(self, hero, goblin, abilities):
        text = activate(abilities["shove"], hero, goblin)
        assert goblin.health == 2
        assert "10 feet" in text

    def test_does_not_move_target(self, hero, goblin, abilities):
        activate(abilities["shove"], hero, goblin)
        assert goblin.room_id == 1


class TestFireball:
    def test_damage(self, hero, goblin, abilities):
        goblin.health = 30
        activate(abilities["fireball"], hero, goblin)
        assert goblin.health == 30 - (12 - 2)


class TestHeal:
    def test_heals_player_below_cap(self, hero, abilities):
        hero.max_health = 100
        hero.health = 50
        activate(abilities["heal"], hero, hero)
        assert hero.health == 65

    def test_clamps_player_at_max(self, hero, abilities):
        hero.max_health = 100
        hero.health = 95
        activate(abilities["heal"], hero, hero)
        assert hero.health == 100

    def test_ignores_mitigation(self, hero, armor, abilities):
        hero.equipment.armor = armor
        hero.max_health = 100
        hero.health = 50
        activate(abilities["heal"], hero, hero)
        assert hero.health == 65

    def test_monster_heal_is_uncapped(self, hero, goblin, abilities):
        activate(abilities["heal"], hero, goblin)
        assert goblin.health == 20


class TestCombatAbility:
    def test_adds_weapon_attack(self, hero, goblin, sword, abilities):
        hero.equipment.weapon = sword
        goblin.health = 20
        text = activate(abilities["combat"], hero, goblin)
        assert goblin.health == 20 - (5 + 4 - 2)
        assert "Short Sword" in text

    def test_unarmed_uses_bonus_only(self, hero, goblin, abilities):
        goblin.health = 20
        text = activate(abilities["combat"], hero, goblin)
        assert goblin.health == 20 - (4 - 2)
        assert "Fists" in text


class TestDescribeStats:
    def test_heal_shows_positive_amount(self, abilities):
        assert describe_stats(abilities["heal"]) == "Heal: 15"

    def test_shove(self, abilities):
        assert describe_stats(abilities["shove"]) == "Dmg: 5, Dist: 10"
