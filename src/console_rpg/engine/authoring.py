"""World authoring and admin queries used by the CLI's management commands."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from console_rpg.errors import NotFoundError, UnknownMonsterKindError
from console_rpg.mechanics.leveling import level_for_xp
from console_rpg.mechanics.room_graph import Direction, RoomGraph, exits
from console_rpg.models.ability import AbilityBase
from console_rpg.models.character import Player
from console_rpg.models.monster import MONSTER_KINDS, MonsterBase, parse_monster
from console_rpg.models.room import Room
from console_rpg.storage.database import Database

logger = logging.getLogger(__name__)

# Armor class given to newly placed monsters when none is given.
DEFAULT_ARMOR_CLASS: dict[str, int] = {
    "goblin": 2,
    "beast": 3,
    "bandit": 4,
    "undead": 5,
}


@dataclass
class RoomDetails:
    room: Room
    exits: dict[Direction, Room] = field(default_factory=dict)
    players: list[Player] = field(default_factory=list)
    monsters: list[MonsterBase] = field(default_factory=list)


class WorldAuthor:
    def __init__(self, db: Database, repos: dict[str, Any]):
        self.db = db
        self.repos = repos

    def create_room(
        self,
        source_id: int,
        direction: Direction | str,
        name: str,
        description: str = "",
    ) -> Room:
        """Add a room next to ``source_id`` and link both rooms.

        Raises OccupiedCoordinateError if the target square is taken.
        """
        if not isinstance(direction, Direction):
            direction = Direction.parse(direction)
        with self.db.transaction():
            graph = RoomGraph(self.repos["rooms"].get_all())
            new_room = graph.create_room(source_id, direction, name, description)
            self.repos["rooms"].save(new_room)
            self.repos["rooms"].save(graph.get(source_id))
        logger.info("Created room %s at (%d, %d)", new_room.name, new_room.x, new_room.y)
        return new_room

    def add_character(
        self,
        name: str,
        health: int,
        room_id: int | None = None,
        ability_ids: Iterable[int] = (),
    ) -> Player:
        """Create a player character. Max health starts equal to ``health``."""
        rooms = self.repos["rooms"]
        with self.db.transaction():
            if room_id is None:
                first = rooms.get_first()
                room_id = first.id if first else None
            elif rooms.get(room_id) is None:
                raise NotFoundError("Room", room_id)
            player = Player(
                id=self.repos["players"].next_id(),
                name=name,
                health=health,
                max_health=health,
                room_id=room_id,
                ability_ids=set(ability_ids),
            )
            self.repos["players"].save(player)
        logger.info("Added character %s", name)
        return player

    def edit_character(
        self,
        player_id: int,
        name: str | None = None,
        health: int | None = None,
        experience: int | None = None,
    ) -> Player:
        """Overwrite a character's name, health or experience.

        Level follows the new experience. Setting health above the maximum
        raises the maximum with it.
        """
        with self.db.transaction():
            player = self.repos["players"].get(player_id)
            if player is None:
                raise NotFoundError("Player", player_id)
            if name is not None:
                player.name = name
            if health is not None:
                player.health = health
                player.max_health = max(player.max_health, health)
            if experience is not None:
                player.experience = experience
                player.level = level_for_xp(experience)
            self.repos["players"].save(player)
        logger.info("Character %s (id %d) updated", player.name, player.id)
        return player

    def learn_ability(self, player_id: int, ability_id: int) -> str:
        """Teach a player an ability. Teaching a known ability changes nothing."""
        with self.db.transaction():
            player = self.repos["players"].get(player_id)
            if player is None:
                raise NotFoundError("Player", player_id)
            ability = self.repos["abilities"].get(ability_id)
            if ability is None:
                raise NotFoundError("Ability", ability_id)
            learned = self.repos["players"].learn_ability(player_id, ability_id)
        if not learned:
            return f"{player.name} already knows {ability.name}."
        logger.info("%s learned %s", player.name, ability.name)
        return f"{player.name} learned {ability.name}!"

    def place_monster(
        self,
        kind: str,
        name: str,
        room_id: int,
        health: int,
        aggression_level: int = 1,
        armor_class: int | None = None,
        loot_item_id: int | None = None,
    ) -> MonsterBase:
        if kind not in MONSTER_KINDS:
            raise UnknownMonsterKindError(kind)
        with self.db.transaction():
            if self.repos["rooms"].get(room_id) is None:
                raise NotFoundError("Room", room_id)
            if loot_item_id is not None and self.repos["items"].get(loot_item_id) is None:
                raise NotFoundError("Item", loot_item_id)
            monster = parse_monster({
                "id": self.repos["monsters"].next_id(),
                "kind": kind,
                "name": name,
                "health": health,
                "aggression_level": aggression_level,
                "armor_class": DEFAULT_ARMOR_CLASS.get(kind, 0) if armor_class is None else armor_class,
                "room_id": room_id,
                "loot_item_id": loot_item_id,
            })
            self.repos["monsters"].save(monster)
        logger.info("Placed %s (%s) in room %d", name, kind, room_id)
        return monster

    # -- Admin queries --

    def players_in_room_above(self, room_id: int, attribute: str, threshold: int) -> list[Player]:
        """Players in ``room_id`` whose ``attribute`` (level, health, experience) exceeds ``threshold``."""
        return self.repos["players"].get_by_room_with_attribute_above(room_id, attribute, threshold)

    def all_characters(self) -> list[tuple[Player, Room | None]]:
        return self._with_rooms(self.repos["players"].get_all())

    def search_characters(self, search: str) -> list[tuple[Player, Room | None]]:
        """Characters whose name contains ``search``, ignoring case."""
        return self._with_rooms(self.repos["players"].search_by_name(search))

    def character_abilities(self, player_id: int) -> tuple[Player, list[AbilityBase]]:
        player = self.repos["players"].get(player_id)
        if player is None:
            raise NotFoundError("Player", player_id)
        return player, self.repos["abilities"].get_many(player.ability_ids)

    def ability_catalog(self) -> list[AbilityBase]:
        return self.repos["abilities"].get_all()

    def room_details(self, room_id: int) -> RoomDetails:
        """A room with its neighbors, the characters in it and the monsters lurking there."""
        rooms = self.repos["rooms"]
        room = rooms.get(room_id)
        if room is None:
            raise NotFoundError("Room", room_id)
        details = RoomDetails(
            room=room,
            players=self.repos["players"].get_by_room(room_id),
            monsters=self.repos["monsters"].get_by_room(room_id),
        )
        for direction, neighbor_id in exits(room).items():
            neighbor = rooms.get(neighbor_id)
            if neighbor is None:
                logger.warning("Room %d has a dangling %s exit to %d", room_id, direction.value, neighbor_id)
                continue
            details.exits[direction] = neighbor
        return details

    def rooms_with_inhabitants(self) -> list[tuple[Room, list[Player], list[MonsterBase]]]:
        """Every room paired with the characters standing in it and the monsters lurking there."""
        players = self.repos["players"]
        monsters_by_room: dict[int, list[MonsterBase]] = {}
        for monster in self.repos["monsters"].get_all():
            if monster.room_id is not None:
                monsters_by_room.setdefault(monster.room_id, []).append(monster)
        return [
            (room, players.get_by_room(room.id), monsters_by_room.get(room.id, []))
            for room in self.repos["rooms"].get_all()
        ]

    def find_equipment(self, search: str) -> list[tuple[Player, Room | None]]:
        """Players with an equipped item whose name contains ``search``, with their room."""
        return self._with_rooms(self.repos["players"].find_by_equipment_name(search))

    def _with_rooms(self, players: Iterable[Player]) -> list[tuple[Player, Room | None]]:
        rooms = self.repos["rooms"]
        return [(p, rooms.get(p.room_id) if p.room_id is not None else None) for p in players]
