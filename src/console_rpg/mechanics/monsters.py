"""Monster counter-attacks: pure functions, no I/O."""
from __future__ import annotations

from console_rpg.mechanics.combat import Target, receive_attack
from console_rpg.models.monster import Bandit, Beast, Goblin, MonsterBase, Undead

ATTACK_BONUS: dict[str, int] = {
    "goblin": 0,
    "beast": 2,
    "undead": 0,
    "bandit": 3,
}


def attack_damage(monster: MonsterBase) -> int:
    """Raw damage of a monster's attack before the target's mitigation."""
    return monster.aggression_level + ATTACK_BONUS[monster.kind]


def monster_attack(monster: MonsterBase, target: Target) -> str:
    """Let ``monster`` strike ``target`` once. Returns a combat-log line."""
    actual = receive_attack(target, attack_damage(monster))
    match monster:
        case Goblin():
            return f"{monster.name} sneaks up and attacks {target.name} for {actual} damage!"
        case Beast():
            return f"The {monster.name} lunges at {target.name} with feral rage for {actual} damage!"
        case Undead():
            return f"{monster.name} strikes {target.name} with a bone-chilling touch for {actual} necrotic damage!"
        case Bandit():
            return f"{monster.name} attacks {target.name} with a rusty weapon dealing {actual} damage!"
    raise TypeError(f"Unknown monster variant: {type(monster).__name__}")
