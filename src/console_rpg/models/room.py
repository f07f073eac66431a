from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Room(BaseModel):
    """A node of the room graph. Exits are optional ids of neighboring rooms."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str = ""
    x: int = 0
    y: int = 0
    north_id: Optional[int] = None
    south_id: Optional[int] = None
    east_id: Optional[int] = None
    west_id: Optional[int] = None

    @property
    def coordinates(self) -> tuple[int, int]:
        return (self.x, self.y)
