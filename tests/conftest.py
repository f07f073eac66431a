"""Shared fixtures for the Console RPG test suite."""
from __future__ import annotations

import pytest

from console_rpg.models.ability import Combat, Fireball, Heal, Shove
from console_rpg.models.character import Player
from console_rpg.models.item import Item, ItemType
from console_rpg.models.monster import Goblin
from console_rpg.models.room import Room


@pytest.fixture
def sword() -> Item:
    return Item(id=10, name="Short Sword", item_type=ItemType.WEAPON, attack=5, weight=2.0, value=10)


@pytest.fixture
def armor() -> Item:
    return Item(id=11, name="Leather Armor", item_type=ItemType.ARMOR, defense=2, weight=8.0, value=10)


@pytest.fixture
def hero() -> Player:
    return Player(id=1, name="Hero", health=20, max_health=20, room_id=1)


@pytest.fixture
def goblin() -> Goblin:
    return Goblin(id=1, name="Goblin", health=5, aggression_level=1, armor_class=2, room_id=1)


@pytest.fixture
def abilities() -> dict[str, object]:
    return {
        "shove": Shove(id=1, name="Shove", damage=5, distance=10),
        "fireball": Fireball(id=2, name="Fireball", damage=12, distance=30),
        "heal": Heal(id=3, name="Holy Light", damage=-15),
        "combat": Combat(id=4, name="Power Strike", damage=4),
    }


@pytest.fixture
def in_memory_db(tmp_path):
    from console_rpg.storage.database import Database

    db = Database(str(tmp_path / "test.db"))
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def repos(in_memory_db):
    from console_rpg.storage.repos import build_repos

    return build_repos(in_memory_db)


@pytest.fixture
def seeded_db(in_memory_db):
    from console_rpg.content.loader import load_world
    from console_rpg.storage.seed import seed_world

    seed_world(in_memory_db, load_world("starter"))
    return in_memory_db


@pytest.fixture
def small_world(in_memory_db, repos, sword, armor, abilities):
    """Two rooms (hall south of yard), one hero in the hall, one goblin with the armor as loot."""
    with in_memory_db.transaction():
        repos["items"].save(sword)
        repos["items"].save(armor)
        for ability in abilities.values():
            repos["abilities"].save(ability)
        repos["rooms"].save(Room(id=1, name="Hall", x=0, y=0, north_id=2))
        repos["rooms"].save(Room(id=2, name="Yard", x=0, y=1, south_id=1))
        hero = Player(id=1, name="Hero", health=20, max_health=20, room_id=1)
        hero.equipment.weapon = sword
        hero.ability_ids = {abilities["fireball"].id, abilities["heal"].id}
        repos["players"].save(hero)
        repos["monsters"].save(
            Goblin(id=1, name="Goblin", health=5, aggression_level=1, armor_class=2, room_id=1, loot_item_id=armor.id)
        )
    return repos
