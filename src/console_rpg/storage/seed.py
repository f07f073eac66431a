"""Write world content into an empty store."""
from __future__ import annotations

import logging
from typing import Any

from console_rpg.models.ability import parse_ability
from console_rpg.models.character import Player
from console_rpg.models.item import Equipment, Inventory, Item
from console_rpg.models.monster import parse_monster
from console_rpg.models.room import Room
from console_rpg.storage.database import Database
from console_rpg.storage.repos import AbilityRepo, ItemRepo, MonsterRepo, PlayerRepo, RoomRepo

logger = logging.getLogger(__name__)


def _build_player(data: dict[str, Any], items: dict[int, Item]) -> Player:
    data = dict(data)
    weapon_id = data.pop("weapon_id", None)
    armor_id = data.pop("armor_id", None)
    inventory_ids = data.pop("inventory", [])
    data.setdefault("max_health", data.get("health", 100))
    player = Player.model_validate(data)
    player.equipment = Equipment(
        weapon=items.get(weapon_id) if weapon_id is not None else None,
        armor=items.get(armor_id) if armor_id is not None else None,
    )
    if inventory_ids:
        player.inventory = Inventory(player_id=player.id, items=[items[i] for i in inventory_ids])
    return player


def seed_world(db: Database, data: dict[str, list[dict]]) -> bool:
    """Seed items, abilities, rooms, monsters and players.

    Does nothing when rooms already exist. Returns True if anything was written.
    """
    rooms = RoomRepo(db)
    if rooms.count() > 0:
        logger.debug("World already seeded, skipping")
        return False

    item_repo = ItemRepo(db)
    ability_repo = AbilityRepo(db)
    monster_repo = MonsterRepo(db)
    player_repo = PlayerRepo(db)

    items = {d["id"]: Item.model_validate(d) for d in data.get("items", [])}
    with db.transaction():
        for item in items.values():
            item_repo.save(item)
        for d in data.get("abilities", []):
            ability_repo.save(parse_ability(d))
        for d in data.get("rooms", []):
            rooms.save(Room.model_validate(d))
        for d in data.get("monsters", []):
            monster_repo.save(parse_monster(d))
        for d in data.get("players", []):
            player_repo.save(_build_player(d, items))

    logger.info(
        "Seeded %d rooms, %d monsters, %d players",
        len(data.get("rooms", [])), len(data.get("monsters", [])), len(data.get("players", [])),
    )
    return True
