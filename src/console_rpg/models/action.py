from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ActionType(str, Enum):
    GO_NORTH = "Go North"
    GO_SOUTH = "Go South"
    GO_EAST = "Go East"
    GO_WEST = "Go West"
    ATTACK = "Attack Monster"
    USE_ABILITY = "Use Ability"
    EQUIP_ITEM = "Equip Item"
    VIEW_INVENTORY = "View Inventory"
    VIEW_STATS = "View Character Stats"
    VIEW_MAP = "View Map"

    @property
    def direction(self) -> str | None:
        """Lowercase direction name for movement actions, else None."""
        if self.value.startswith("Go "):
            return self.value[3:].lower()
        return None


class EventType(str, Enum):
    MOVE = "MOVE"
    ATTACK = "ATTACK"
    ABILITY = "ABILITY"
    COUNTER_ATTACK = "COUNTER_ATTACK"
    DEATH = "DEATH"
    LOOT = "LOOT"
    LEVEL_UP = "LEVEL_UP"
    EQUIP = "EQUIP"
    PLAYER_DEFEAT = "PLAYER_DEFEAT"


@dataclass
class Action:
    action_type: ActionType
    actor_id: int
    target_id: Optional[int] = None
    parameters: dict[str, Any] = field(default_factory=dict)
    raw_input: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def parse(cls, label: str, actor_id: int, **kwargs: Any) -> Action:
        """Build an action from a menu label such as ``"Go North"``.

        Raises ValueError for labels that name no known action.
        """
        return cls(action_type=ActionType(label.strip()), actor_id=actor_id, raw_input=label, **kwargs)


@dataclass
class ActionResult:
    """Outcome of one action, handed to the presentation layer.

    ``message`` is a short status line, ``outcome_description`` the
    multi-line log. ``value`` carries the destination room, the targeted
    monster, or the candidates when the caller must pick a target.
    """

    action_id: str = ""
    success: bool = False
    message: str = ""
    outcome_description: str = ""
    value: Any = None
    events: list[dict[str, Any]] = field(default_factory=list)
    xp_gained: int = 0
    game_over: bool = False

    @classmethod
    def ok(cls, action_id: str, message: str, description: str = "", value: Any = None, **kwargs: Any) -> ActionResult:
        return cls(
            action_id=action_id, success=True, message=message,
            outcome_description=description or message, value=value, **kwargs,
        )

    @classmethod
    def fail(cls, action_id: str, message: str, description: str = "", value: Any = None) -> ActionResult:
        return cls(
            action_id=action_id, success=False, message=message,
            outcome_description=description or message, value=value,
        )
