"""Exception taxonomy for engine operations.

Game errors describe expected failures (no exit, no target, ...) and are
turned into failed action results by the systems. ``PersistenceError`` is
the one category that escapes to the dispatcher.
"""
from __future__ import annotations


class GameError(Exception):
    """Base class for expected, user-facing failures."""


class InvalidDirectionError(GameError):
    def __init__(self, direction: str) -> None:
        super().__init__(f"You cannot go {direction} from here - there is no exit in that direction.")
        self.direction = direction


class NoTargetError(GameError):
    def __init__(self) -> None:
        super().__init__("There are no monsters in this room to target.")


class TargetRequiredError(GameError):
    """Several monsters are present and the caller did not pick one."""

    def __init__(self, candidates: list) -> None:
        super().__init__("Select a monster to target.")
        self.candidates = candidates


class UnknownAbilityError(GameError):
    def __init__(self, ability_id: int | None) -> None:
        if ability_id is None:
            super().__init__("You haven't learned any abilities yet!")
        else:
            super().__init__("You haven't learned that ability.")
        self.ability_id = ability_id


class NotFoundError(GameError):
    def __init__(self, kind: str, entity_id: object) -> None:
        super().__init__(f"{kind} {entity_id} does not exist.")
        self.kind = kind
        self.entity_id = entity_id


class OccupiedCoordinateError(GameError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"There is already a room at ({x}, {y})!")
        self.x = x
        self.y = y


class UnknownMonsterKindError(GameError):
    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown monster kind: {kind}")
        self.kind = kind


class PersistenceError(Exception):
    """The underlying store failed."""
