"""Player ability variants as a tagged union keyed on ``kind``.

All variants share the same stats; they differ only in how
:func:`console_rpg.mechanics.abilities.activate` resolves them.
"""
from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class AbilityBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str
    description: str = ""
    damage: int = 0
    distance: int = 0


class Shove(AbilityBase):
    kind: Literal["shove"] = "shove"


class Fireball(AbilityBase):
    kind: Literal["fireball"] = "fireball"


class Heal(AbilityBase):
    kind: Literal["heal"] = "heal"


class Combat(AbilityBase):
    kind: Literal["combat"] = "combat"


Ability = Annotated[Union[Shove, Fireball, Heal, Combat], Field(discriminator="kind")]

_adapter: TypeAdapter = TypeAdapter(Ability)


def parse_ability(data: dict[str, Any]) -> Shove | Fireball | Heal | Combat:
    return _adapter.validate_python(data)
