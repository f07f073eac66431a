"""System registry: manages pluggable game systems."""
from __future__ import annotations

import logging
from typing import Any

from console_rpg.models.action import Action
from console_rpg.systems.base import GameContext, GameSystem

logger = logging.getLogger(__name__)


class SystemRegistry:
    def __init__(self) -> None:
        self._systems: dict[str, GameSystem] = {}

    def register(self, system: GameSystem) -> None:
        self._systems[system.system_id] = system

    def find_system_for_action(self, action: Action, context: GameContext) -> GameSystem | None:
        for system in self._systems.values():
            if system.can_handle(action, context):
                return system
        return None

    def get_all_available_actions(self, context: GameContext) -> list[dict]:
        actions: list[dict] = []
        for system in self._systems.values():
            actions.extend(system.get_available_actions(context))
        return actions

    def inject_all(self, **deps: Any) -> None:
        """Inject dependencies into all registered systems."""
        for system in self._systems.values():
            system.inject(**deps)

    def register_defaults(self) -> None:
        from console_rpg.systems.combat.system import CombatSystem
        from console_rpg.systems.exploration.system import ExplorationSystem
        from console_rpg.systems.inventory.system import InventorySystem

        self.register(ExplorationSystem())
        self.register(CombatSystem())
        self.register(InventorySystem())
