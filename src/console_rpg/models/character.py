from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from console_rpg.models.item import Equipment, Inventory

DEFAULT_MAX_HEALTH = 100


class Player(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    health: int = DEFAULT_MAX_HEALTH
    max_health: int = DEFAULT_MAX_HEALTH
    level: int = 1
    experience: int = 0
    room_id: Optional[int] = None
    equipment: Equipment = Field(default_factory=Equipment)
    inventory: Optional[Inventory] = None
    ability_ids: set[int] = Field(default_factory=set)

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    def knows(self, ability_id: int) -> bool:
        return ability_id in self.ability_ids

    def ensure_inventory(self) -> Inventory:
        """Return the player's inventory, creating an empty one on first need."""
        if self.inventory is None:
            self.inventory = Inventory(player_id=self.id)
        return self.inventory
