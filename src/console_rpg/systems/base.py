"""Base interface for pluggable game systems."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from console_rpg.mechanics.room_graph import RoomGraph
    from console_rpg.models.ability import AbilityBase
    from console_rpg.models.action import Action, ActionResult
    from console_rpg.models.character import Player
    from console_rpg.models.item import Item
    from console_rpg.models.monster import MonsterBase
    from console_rpg.models.room import Room


class GameContext:
    """Loaded game state passed to systems.

    Systems mutate these models in place; the dispatcher persists the
    player, the monsters and ``removed_monster_ids`` afterwards.
    """

    def __init__(
        self,
        player: Player,
        room: Room,
        graph: RoomGraph,
        monsters: list[MonsterBase] | None = None,
        abilities: dict[int, AbilityBase] | None = None,
        items: dict[int, Item] | None = None,
    ):
        self.player = player
        self.room = room
        self.graph = graph
        self.monsters = monsters or []
        self.abilities = abilities or {}
        self.items = items or {}
        self.removed_monster_ids: set[int] = set()

    def monster(self, monster_id: int) -> MonsterBase | None:
        for m in self.monsters:
            if m.id == monster_id:
                return m
        return None

    def living_monsters(self) -> list[MonsterBase]:
        return [m for m in self.monsters if m.id not in self.removed_monster_ids]


class GameSystem(ABC):
    """Base class for all pluggable game systems."""

    @property
    @abstractmethod
    def system_id(self) -> str: ...

    @property
    @abstractmethod
    def handled_action_types(self) -> set[str]: ...

    def can_handle(self, action: Action, context: GameContext) -> bool:
        return action.action_type.value in self.handled_action_types

    @abstractmethod
    def resolve(self, action: Action, context: GameContext) -> ActionResult: ...

    def get_available_actions(self, context: GameContext) -> list[dict]:
        return []

    def inject(self, *, repos: dict | None = None, **kwargs: Any) -> None:
        """Inject runtime dependencies. Systems override to accept what they need."""
