from __future__ import annotations

from console_rpg.storage.repos.ability_repo import AbilityRepo
from console_rpg.storage.repos.item_repo import ItemRepo
from console_rpg.storage.repos.monster_repo import MonsterRepo
from console_rpg.storage.repos.player_repo import PlayerRepo
from console_rpg.storage.repos.room_repo import RoomRepo
from console_rpg.storage.database import Database

__all__ = [
    "AbilityRepo",
    "ItemRepo",
    "MonsterRepo",
    "PlayerRepo",
    "RoomRepo",
    "build_repos",
]


def build_repos(db: Database) -> dict[str, object]:
    """All repositories over one database, keyed the way systems look them up."""
    return {
        "players": PlayerRepo(db),
        "rooms": RoomRepo(db),
        "monsters": MonsterRepo(db),
        "items": ItemRepo(db),
        "abilities": AbilityRepo(db),
    }
