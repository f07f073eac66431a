"""Monster variants as a tagged union keyed on ``kind``."""
from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class MonsterBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    health: int
    aggression_level: int = 1
    armor_class: int = 0
    room_id: Optional[int] = None
    loot_item_id: Optional[int] = None

    @property
    def is_dead(self) -> bool:
        return self.health <= 0


class Goblin(MonsterBase):
    kind: Literal["goblin"] = "goblin"
    sneakiness: int = 0


class Beast(MonsterBase):
    kind: Literal["beast"] = "beast"


class Undead(MonsterBase):
    kind: Literal["undead"] = "undead"


class Bandit(MonsterBase):
    kind: Literal["bandit"] = "bandit"


Monster = Annotated[Union[Goblin, Beast, Undead, Bandit], Field(discriminator="kind")]

MONSTER_KINDS: tuple[str, ...] = ("goblin", "beast", "undead", "bandit")

_adapter: TypeAdapter = TypeAdapter(Monster)


def parse_monster(data: dict[str, Any]) -> Goblin | Beast | Undead | Bandit:
    """Build the concrete monster variant named by ``data["kind"]``."""
    return _adapter.validate_python(data)
