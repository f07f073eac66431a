"""Monster death, experience reward and loot transfer: pure, no I/O.

Deleting the dead monster from storage is left to the caller, which
persists the outcome together with the rest of the action.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from console_rpg.mechanics.leveling import gain_experience
from console_rpg.models.character import Player
from console_rpg.models.item import Item
from console_rpg.models.monster import MonsterBase

logger = logging.getLogger(__name__)

KILL_XP = 50


@dataclass
class DeathOutcome:
    monster_id: int
    xp_gained: int
    xp_message: str
    leveled_up: bool
    looted: Optional[Item] = None
    lines: list[str] = field(default_factory=list)


def resolve_death_if_applicable(
    monster: MonsterBase,
    player: Player,
    loot_item: Item | None = None,
) -> DeathOutcome | None:
    """Reward ``player`` for killing ``monster``. Returns None if it still stands.

    ``loot_item`` is the resolved item behind ``monster.loot_item_id``; it
    moves into the player's inventory, which is created if missing.
    """
    if not monster.is_dead:
        return None

    level_before = player.level
    xp_message = gain_experience(player, KILL_XP)
    outcome = DeathOutcome(
        monster_id=monster.id,
        xp_gained=KILL_XP,
        xp_message=xp_message,
        leveled_up=player.level > level_before,
    )
    outcome.lines.append(f"VICTORY! {monster.name} has been defeated!")
    outcome.lines.append(xp_message)

    if monster.loot_item_id is not None:
        if loot_item is not None and loot_item.id == monster.loot_item_id:
            player.ensure_inventory().items.append(loot_item)
            outcome.looted = loot_item
            outcome.lines.append(f"{monster.name} dropped {loot_item.name}! It is now in your backpack.")
        else:
            logger.warning("Loot item %s of monster %s could not be resolved", monster.loot_item_id, monster.id)
        monster.loot_item_id = None

    monster.room_id = None
    return outcome
