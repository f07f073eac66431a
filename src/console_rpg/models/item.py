from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemType(str, Enum):
    WEAPON = "weapon"
    ARMOR = "armor"
    OTHER = "other"


class Item(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str
    item_type: ItemType = ItemType.OTHER
    attack: int = 0
    defense: int = 0
    weight: float = 0.0
    value: int = 0


class Equipment(BaseModel):
    """A player's weapon and armor slots. Either slot may be empty."""

    model_config = ConfigDict(from_attributes=True)

    weapon: Optional[Item] = None
    armor: Optional[Item] = None

    @property
    def defense(self) -> int:
        armor_def = self.armor.defense if self.armor else 0
        weapon_def = self.weapon.defense if self.weapon else 0
        return armor_def + weapon_def


class Inventory(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    player_id: int
    items: list[Item] = Field(default_factory=list)

    def find(self, item_id: int) -> Item | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None
