"""Ability effects: pure functions, no I/O."""
from __future__ import annotations

from console_rpg.mechanics.combat import Target, receive_attack
from console_rpg.models.ability import AbilityBase, Combat, Fireball, Heal, Shove
from console_rpg.models.character import Player


def activate(ability: AbilityBase, user: Player, target: Target) -> str:
    """Resolve ``ability`` used by ``user`` on ``target``. Returns a combat-log line.

    Whether the user has learned the ability is checked by the caller.
    """
    match ability:
        case Shove():
            # Distance is flavor only; nobody is repositioned.
            actual = receive_attack(target, ability.damage)
            return f"{user.name} shoves {target.name} back {ability.distance} feet, dealing {actual} damage!"
        case Fireball():
            actual = receive_attack(target, ability.damage)
            return f"{user.name} casts Fireball! {target.name} takes {actual} fire damage and is singed!"
        case Heal():
            amount = abs(ability.damage)
            if isinstance(target, Player):
                target.health = min(target.max_health, target.health + amount)
            else:
                target.health += amount
            return f"{user.name} casts a holy light. {target.name} recovers {amount} HP!"
        case Combat():
            weapon = user.equipment.weapon
            weapon_damage = weapon.attack if weapon else 0
            weapon_name = weapon.name if weapon else "Fists"
            actual = receive_attack(target, weapon_damage + ability.damage)
            return (
                f"{user.name} uses {ability.name} with their {weapon_name}! "
                f"A brutal strike dealing {actual} physical damage!"
            )
    raise TypeError(f"Unknown ability variant: {type(ability).__name__}")


def describe_stats(ability: AbilityBase) -> str:
    """Short stat summary used in ability listings."""
    match ability:
        case Shove() | Fireball():
            return f"Dmg: {ability.damage}, Dist: {ability.distance}"
        case Heal():
            return f"Heal: {abs(ability.damage)}"
        case Combat():
            return f"Bonus Dmg: {ability.damage}"
    return "-"
