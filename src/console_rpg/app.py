"""Main application bootstrap: wires storage, systems and the terminal UI together."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from console_rpg.config import load_config
from console_rpg.models.action import ActionResult, ActionType
from console_rpg.models.item import Item
from console_rpg.models.monster import MonsterBase

logger = logging.getLogger(__name__)

_COMBAT_ACTIONS = {ActionType.ATTACK.value, ActionType.USE_ABILITY.value}


class GameApp:
    """Main application class that bootstraps and runs the game."""

    def __init__(self, config_path: str | Path | None = None, db_path: str | None = None):
        self.config = load_config(config_path)
        if db_path is not None:
            self.config["storage"]["db_path"] = db_path

        # Lazy-initialized components
        self._db = None
        self._repos: dict[str, Any] | None = None
        self._registry = None
        self._dispatcher = None
        self._author = None
        self._display = None
        self._input_handler = None
        self._map_display = None

        self.player_id: int | None = None

    # -- Component initialization (lazy) --

    @property
    def db(self):
        if self._db is None:
            from console_rpg.storage.database import Database

            self._db = Database(self.config["storage"]["db_path"])
            self._db.initialize()
        return self._db

    @property
    def repos(self) -> dict[str, Any]:
        if self._repos is None:
            from console_rpg.storage.repos import build_repos

            self._repos = build_repos(self.db)
        return self._repos

    @property
    def registry(self):
        if self._registry is None:
            from console_rpg.engine.system_registry import SystemRegistry

            self._registry = SystemRegistry()
            self._registry.register_defaults()
            self._registry.inject_all(repos=self.repos)
        return self._registry

    @property
    def dispatcher(self):
        if self._dispatcher is None:
            from console_rpg.engine.action_dispatcher import ActionDispatcher

            self._dispatcher = ActionDispatcher(self.registry, self.db, self.repos)
        return self._dispatcher

    @property
    def author(self):
        if self._author is None:
            from console_rpg.engine.authoring import WorldAuthor

            self._author = WorldAuthor(self.db, self.repos)
        return self._author

    @property
    def display(self):
        if self._display is None:
            from console_rpg.cli.display import Display

            self._display = Display(width=self.config.get("display", {}).get("width", 80))
        return self._display

    @property
    def input_handler(self):
        if self._input_handler is None:
            from console_rpg.cli.input_handler import InputHandler

            self._input_handler = InputHandler()
        return self._input_handler

    @property
    def map_display(self):
        if self._map_display is None:
            from console_rpg.cli.map_display import MapDisplay

            self._map_display = MapDisplay(self.display.console)
        return self._map_display

    # -- Public interface --

    def ensure_world(self) -> bool:
        """Seed the configured world into an empty database."""
        from console_rpg.content.loader import load_world
        from console_rpg.storage.seed import seed_world

        game_cfg = self.config.get("game", {})
        if not game_cfg.get("seed_world", True):
            return False
        return seed_world(self.db, load_world(game_cfg.get("world", "starter")))

    def play(self, player_id: int | None = None) -> None:
        """Run the interactive game loop for one character."""
        self.ensure_world()
        player = self.repos["players"].get(player_id) if player_id is not None else self.repos["players"].get_first()
        if player is None:
            self.display.error("No players found! Please create a character first.")
            return
        self.player_id = player.id

        self.display.show_title_screen()
        self.display.info(f"Welcome, {player.name}! Use the menu below to explore, fight monsters, and manage your character.")
        logger.info("Session started for %s", player.name)
        self._run_game_loop()

    def _run_game_loop(self) -> None:
        while True:
            self._show_current_room()
            raw_input = self.display.show_menu()
            if not raw_input:
                continue

            classified = self.input_handler.classify(raw_input)
            action_type = classified.get("action_type")
            if classified.get("is_meta"):
                if action_type == "quit":
                    self.display.info("Farewell, adventurer.")
                    break
                self.display.show_help()
                continue
            if action_type is None:
                self.display.error(f"Unknown action: {raw_input}")
                continue

            result = self._perform(action_type, classified.get("target"))
            if result is None:
                continue
            self._show_result(action_type, result)
            if result.game_over:
                self.display.show_game_over(self.repos["players"].get(self.player_id))
                break

    def _perform(self, label: str, target_text: str | None = None) -> ActionResult | None:
        """Dispatch an action, prompting for a target, ability or item when needed."""
        kwargs: dict[str, Any] = {}
        ability = self._match_ability(target_text) if label == ActionType.USE_ABILITY.value and target_text else None
        if ability is not None:
            kwargs["parameters"] = {"ability_id": ability.id}
        elif target_text:
            target = self._match_target(label, target_text)
            if target is None:
                self.display.error(f"There is no '{target_text}' here.")
                return None
            kwargs["target_id"] = target.id
        if label == ActionType.USE_ABILITY.value and ability is None:
            ability_id = self._choose_ability()
            if ability_id is False:
                return None
            if ability_id is not None:
                kwargs["parameters"] = {"ability_id": ability_id}

        result = self.dispatcher.dispatch_label(label, self.player_id, **kwargs)
        if not result.success and "target_id" not in kwargs and isinstance(result.value, list) and result.value:
            choice = self._choose_from(result.value)
            if choice is None:
                self.display.error("Invalid selection.")
                return None
            result = self.dispatcher.dispatch_label(label, self.player_id, target_id=choice.id, **kwargs)
        return result

    def _match_target(self, label: str, text: str) -> Any | None:
        """Resolve a typed name to a monster in the room, or a backpack item for Equip Item."""
        player = self.repos["players"].get(self.player_id)
        if player is None:
            return None
        if label == ActionType.EQUIP_ITEM.value:
            options = list(player.inventory.items) if player.inventory else []
        elif label in _COMBAT_ACTIONS and player.room_id is not None:
            options = self.repos["monsters"].get_by_room(player.room_id)
        else:
            return None
        return self.input_handler.match_name(text, options)

    def _match_ability(self, text: str) -> Any | None:
        player = self.repos["players"].get(self.player_id)
        if player is None:
            return None
        return self.input_handler.match_name(text, self.repos["abilities"].get_many(player.ability_ids))

    def _choose_ability(self) -> int | None | bool:
        """Ask which ability to use. False means the player picked nothing valid."""
        player = self.repos["players"].get(self.player_id)
        if player is None or len(player.ability_ids) <= 1:
            return None
        from console_rpg.mechanics.abilities import describe_stats

        abilities = self.repos["abilities"].get_many(player.ability_ids)
        raw = self.display.show_choices(
            "Select an ability:", abilities, lambda a: f"{a.name} ({a.kind}) - {describe_stats(a)}",
        )
        ability = self.input_handler.resolve_choice(raw, abilities)
        if ability is None:
            self.display.error("Invalid selection.")
            return False
        return ability.id

    def _choose_from(self, options: list[Any]) -> Any | None:
        if isinstance(options[0], MonsterBase):
            raw = self.display.show_choices("Select a monster:", options, lambda m: f"{m.name} (HP: {m.health})")
        elif isinstance(options[0], Item):
            raw = self.display.show_choices("Select an item:", options, lambda i: f"{i.name} ({i.item_type.value})")
        else:
            return None
        return self.input_handler.resolve_choice(raw, options)

    def _show_result(self, label: str, result: ActionResult) -> None:
        if label == ActionType.VIEW_MAP.value and result.success:
            value = result.value
            self.map_display.render(value["layout"], value["current_room_id"], value["monster_room_ids"])
            self.display.show_result(result)
            return
        self.display.show_result(result)
        if label in _COMBAT_ACTIONS and result.success:
            player = self.repos["players"].get(self.player_id)
            self.display.show_combat_summary(player, result.value)

    def _show_current_room(self) -> None:
        player = self.repos["players"].get(self.player_id)
        if player is None or player.room_id is None:
            return
        room = self.repos["rooms"].get(player.room_id)
        if room is None:
            return
        others = [p for p in self.repos["players"].get_by_room(room.id) if p.id != player.id]
        self.display.show_room(room, self.repos["monsters"].get_by_room(room.id), others)

    def close(self) -> None:
        if self._db is not None:
            self._db.close()
