"""Action dispatcher: loads state, routes actions to systems, persists outcomes."""
from __future__ import annotations

import logging
from typing import Any

from console_rpg.engine.system_registry import SystemRegistry
from console_rpg.errors import GameError, NotFoundError, PersistenceError
from console_rpg.mechanics.room_graph import RoomGraph
from console_rpg.models.action import Action, ActionResult
from console_rpg.models.character import Player
from console_rpg.storage.database import Database
from console_rpg.systems.base import GameContext

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """Runs one action as a unit of work.

    The player, their room and its monsters are loaded, the responsible
    system mutates them in memory, and everything is written back in a
    single transaction. A storage failure rolls the whole action back.
    """

    def __init__(self, registry: SystemRegistry, db: Database, repos: dict[str, Any]):
        self.registry = registry
        self.db = db
        self.repos = repos

    def dispatch_label(self, label: str, player_id: int, **kwargs: Any) -> ActionResult:
        """Dispatch a menu label such as ``"Attack Monster"``."""
        try:
            action = Action.parse(label, player_id, **kwargs)
        except ValueError:
            return ActionResult.fail("", "Unknown action", f"Unknown action: {label}")
        return self.dispatch(action)

    def dispatch(self, action: Action) -> ActionResult:
        try:
            with self.db.transaction():
                context = self.load_context(action.actor_id)
                system = self.registry.find_system_for_action(action, context)
                if system is None:
                    logger.warning("No system found for action type: %s", action.action_type)
                    return ActionResult.fail(
                        action.id, "Unknown action", f"You're not sure how to '{action.raw_input}'.",
                    )
                result = system.resolve(action, context)
                if result.success:
                    self._persist(context)
                return result
        except GameError as e:
            return ActionResult.fail(action.id, "Action failed", str(e))
        except PersistenceError:
            logger.exception("Storage failure while resolving %s", action.action_type)
            return ActionResult.fail(
                action.id, "Action failed", "Something went wrong while saving. Nothing was changed.",
            )
        except Exception as e:
            logger.exception("Error resolving action %s", action.action_type)
            return ActionResult.fail(action.id, "Action failed", f"Something went wrong: {e}")

    def load_context(self, player_id: int) -> GameContext:
        """Assemble the state a system needs to resolve an action for ``player_id``."""
        player = self.repos["players"].get(player_id)
        if player is None:
            raise NotFoundError("Player", player_id)

        graph = RoomGraph(self.repos["rooms"].get_all())
        room_id = player.room_id if player.room_id in graph else min(graph.rooms, default=None)
        if room_id is None:
            raise NotFoundError("Room", player.room_id)
        player.room_id = room_id
        room = graph.get(room_id)

        monsters = self.repos["monsters"].get_by_room(room.id)
        loot_ids = [m.loot_item_id for m in monsters if m.loot_item_id is not None]
        return GameContext(
            player=player,
            room=room,
            graph=graph,
            monsters=monsters,
            abilities={a.id: a for a in self.repos["abilities"].get_many(player.ability_ids)},
            items=self.repos["items"].get_many(loot_ids),
        )

    def available_actions(self, player: Player) -> list[dict]:
        return self.registry.get_all_available_actions(self.load_context(player.id))

    def _persist(self, context: GameContext) -> None:
        self.repos["players"].save(context.player)
        for monster in context.monsters:
            if monster.id in context.removed_monster_ids:
                self.repos["monsters"].delete(monster.id)
                logger.info("Removed %s from the world", monster.name)
            else:
                self.repos["monsters"].save(monster)
