"""Combat math: pure functions, no I/O.

Every downward change to a combatant's health goes through
:func:`receive_attack`.
"""
from __future__ import annotations

from typing import Union

from console_rpg.models.character import Player
from console_rpg.models.monster import MonsterBase

Target = Union[Player, MonsterBase]

# Damage dealt by a plain attack with no weapon equipped.
UNARMED_DAMAGE = 1


def mitigation(target: Target) -> int:
    """Flat damage reduction of a target.

    Players are protected by the defense of both equipped items, monsters
    by their armor class.
    """
    match target:
        case Player():
            return target.equipment.defense
        case MonsterBase():
            return target.armor_class
    raise TypeError(f"Not a combat target: {type(target).__name__}")


def receive_attack(target: Target, raw_damage: int) -> int:
    """Apply ``raw_damage`` after mitigation. Returns the damage actually dealt."""
    actual = max(0, raw_damage - mitigation(target))
    target.health -= actual
    return actual


def weapon_attack(player: Player, monster: MonsterBase) -> tuple[int, str]:
    """Strike a monster with the player's equipped weapon (or bare fists)."""
    weapon = player.equipment.weapon
    raw = weapon.attack if weapon else UNARMED_DAMAGE
    weapon_name = weapon.name if weapon else "fists"
    actual = receive_attack(monster, raw)
    return actual, f"You attack {monster.name} with {weapon_name}! Dealt {actual} damage."


def health_bar(current: int, maximum: int, length: int = 20) -> str:
    """ASCII health bar, e.g. ``[=========-----------]``."""
    if maximum <= 0:
        filled = 0
    else:
        filled = int(current / maximum * length)
    filled = max(0, min(length, filled))
    return "[" + "=" * filled + "-" * (length - filled) + "]"
