"""Exploration system: movement between rooms and the world map."""
from __future__ import annotations

import logging
from typing import Any

from console_rpg.errors import GameError
from console_rpg.mechanics.room_graph import Direction, exits
from console_rpg.models.action import Action, ActionResult, ActionType, EventType
from console_rpg.systems.base import GameContext, GameSystem

logger = logging.getLogger(__name__)

_MOVES = {ActionType.GO_NORTH, ActionType.GO_SOUTH, ActionType.GO_EAST, ActionType.GO_WEST}


class ExplorationSystem(GameSystem):
    def __init__(self, repos: dict[str, Any] | None = None):
        self._repos = repos or {}

    def inject(self, *, repos: dict | None = None, **kwargs: Any) -> None:
        if repos is not None:
            self._repos = repos

    @property
    def system_id(self) -> str:
        return "exploration"

    @property
    def handled_action_types(self) -> set[str]:
        return {a.value for a in _MOVES} | {ActionType.VIEW_MAP.value}

    def resolve(self, action: Action, context: GameContext) -> ActionResult:
        if action.action_type in _MOVES:
            return self._resolve_move(action, context)
        return self._resolve_map(action, context)

    def get_available_actions(self, context: GameContext) -> list[dict]:
        actions = [
            {"action_type": f"Go {d.value.title()}", "description": f"Go {d.value}"}
            for d in exits(context.room)
        ]
        actions.append({"action_type": ActionType.VIEW_MAP.value, "description": "Look at the map"})
        return actions

    def _resolve_move(self, action: Action, context: GameContext) -> ActionResult:
        direction = Direction.parse(action.action_type.direction or "")
        try:
            destination = context.graph.move(context.player, context.room, direction)
        except GameError as e:
            return ActionResult.fail(action.id, f"Cannot go {direction.value}", str(e))

        context.room = destination
        monsters = self._monsters_in(destination.id)
        context.monsters = monsters
        logger.info("%s moved %s to %s", context.player.name, direction.value, destination.name)

        lines = [f"You travel {direction.value} and arrive at {destination.name}."]
        if destination.description:
            lines.append(destination.description)
        if monsters:
            names = ", ".join(m.name for m in monsters)
            lines.append(f"Danger! Monsters lurk here: {names}")

        return ActionResult.ok(
            action.id,
            f"-> {direction.value}",
            "\n".join(lines),
            value=destination,
            events=[{
                "event_type": EventType.MOVE.value,
                "description": f"Traveled {direction.value} to {destination.name}.",
                "room_id": destination.id,
            }],
        )

    def _resolve_map(self, action: Action, context: GameContext) -> ActionResult:
        monster_rooms: set[int] = set()
        if "monsters" in self._repos:
            monster_rooms = self._repos["monsters"].rooms_with_monsters()
        value = {
            "layout": context.graph.layout(),
            "current_room_id": context.room.id,
            "monster_room_ids": monster_rooms,
        }
        room = context.room
        return ActionResult.ok(
            action.id,
            "Map",
            f"You are at {room.name} ({room.x}, {room.y}).",
            value=value,
        )

    def _monsters_in(self, room_id: int) -> list:
        if "monsters" not in self._repos:
            return []
        return self._repos["monsters"].get_by_room(room_id)
