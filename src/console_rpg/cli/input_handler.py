"""Turns typed commands and numbered menu choices into action labels."""
from __future__ import annotations

import re
from typing import Any

from console_rpg.models.action import ActionType

# Menu order as shown to the player; choice "1" is the first entry.
MENU: list[ActionType] = [
    ActionType.GO_NORTH,
    ActionType.GO_SOUTH,
    ActionType.GO_EAST,
    ActionType.GO_WEST,
    ActionType.ATTACK,
    ActionType.USE_ABILITY,
    ActionType.EQUIP_ITEM,
    ActionType.VIEW_INVENTORY,
    ActionType.VIEW_STATS,
    ActionType.VIEW_MAP,
]

DIRECTION_MAP = {"n": "north", "s": "south", "e": "east", "w": "west"}

# Order matters: meta commands first, greedy patterns last.
PATTERNS: list[tuple[str, str, re.Pattern]] = [
    ("help", "meta", re.compile(r"^(?:help|\?|commands)$", re.I)),
    ("quit", "meta", re.compile(r"^(?:quit|exit|q)$", re.I)),

    ("View Inventory", "inventory", re.compile(r"^(?:i|inventory|inv|bag|backpack)$", re.I)),
    ("View Character Stats", "inventory", re.compile(r"^(?:stats|character|char|sheet|status)$", re.I)),
    ("View Map", "exploration", re.compile(r"^(?:map|world\s*map)$", re.I)),

    ("move", "exploration", re.compile(r"^(?:go|move|walk|head|travel)\s+(?:to\s+)?(north|south|east|west|n|s|e|w)$", re.I)),
    ("move", "exploration", re.compile(r"^(north|south|east|west|n|s|e|w)$", re.I)),

    ("Attack Monster", "combat", re.compile(r"^(?:attack|hit|strike|fight|a)(?:\s+(.+))?$", re.I)),
    ("Use Ability", "combat", re.compile(r"^(?:ability|use\s+ability|cast|skill)(?:\s+(.+))?$", re.I)),
    ("Equip Item", "inventory", re.compile(r"^(?:equip|wear|wield)(?:\s+(.+))?$", re.I)),
]


class InputHandler:
    def classify(self, raw_input: str) -> dict[str, Any]:
        """Classify one line of input.

        ``action_type`` is an action label the dispatcher understands, a
        meta command (``help``/``quit``), or None when nothing matched.
        """
        text = raw_input.strip()
        if not text:
            return self._unrecognized(raw_input)

        if text.isdigit():
            choice = int(text)
            if 1 <= choice <= len(MENU):
                return self._result(MENU[choice - 1].value, None, False, raw_input)
            return self._unrecognized(raw_input)

        for action_name, category, pattern in PATTERNS:
            match = pattern.match(text)
            if not match:
                continue
            target = match.group(1).strip() if match.lastindex and match.group(1) else None
            if action_name == "move":
                direction = DIRECTION_MAP.get(target.lower(), target.lower())
                return self._result(f"Go {direction.title()}", None, False, raw_input)
            return self._result(action_name, target, category == "meta", raw_input)

        return self._unrecognized(raw_input)

    @staticmethod
    def _result(action_type: str | None, target: str | None, is_meta: bool, raw_input: str) -> dict[str, Any]:
        return {
            "action_type": action_type,
            "target": target,
            "is_meta": is_meta,
            "raw_input": raw_input,
        }

    def _unrecognized(self, raw_input: str) -> dict[str, Any]:
        return self._result(None, None, False, raw_input)

    @staticmethod
    def match_name(text: str, options: list[Any]) -> Any | None:
        """Find the option whose ``name`` matches ``text``, ignoring case.

        An exact name wins; otherwise the text must appear in exactly one name.
        """
        needle = text.strip().lower()
        if not needle:
            return None
        for option in options:
            if option.name.lower() == needle:
                return option
        partial = [o for o in options if needle in o.name.lower()]
        return partial[0] if len(partial) == 1 else None

    @staticmethod
    def resolve_choice(raw: str, options: list[Any]) -> Any | None:
        """Pick from a numbered list of options. Returns None for an invalid choice."""
        text = raw.strip()
        if not text.isdigit():
            return None
        idx = int(text) - 1
        if 0 <= idx < len(options):
            return options[idx]
        return None
