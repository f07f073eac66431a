"""ASCII grid map of the room graph."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from console_rpg.mechanics.room_graph import MapLayout

# Each room is drawn as a three-character cell; links take one character.
_CELL_WIDTH = 3


class MapDisplay:
    """Renders rooms on their (x, y) coordinates, north at the top."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def build(self, layout: MapLayout, current_room_id: int | None = None, monster_room_ids: set[int] | None = None) -> Text:
        content = Text()
        if not layout.cells:
            content.append("No rooms yet.", style="dim")
            return content

        monster_room_ids = monster_room_ids or set()
        for y in range(layout.max_y, layout.min_y - 1, -1):
            row = Text()
            below = Text()
            for x in range(layout.min_x, layout.max_x + 1):
                room = layout.cells.get((x, y))
                if room is None:
                    row.append(" " * _CELL_WIDTH)
                    row.append(" ")
                    below.append(" " * (_CELL_WIDTH + 1))
                    continue
                if room.id == current_room_id:
                    row.append("[@]", style="bold green")
                elif room.id in monster_room_ids:
                    row.append("[M]", style="bold red")
                else:
                    row.append("[ ]", style="yellow")
                row.append("-" if room.east_id is not None else " ", style="dim")
                below.append(" | " if room.south_id is not None else "   ", style="dim")
                below.append(" ")
            content.append_text(row)
            content.append("\n")
            if y > layout.min_y:
                content.append_text(below)
                content.append("\n")

        content.append("\n")
        content.append("[@] You  ", style="bold green")
        content.append("[M] Monsters  ", style="bold red")
        content.append("[ ] Room", style="yellow")
        return content

    def render(self, layout: MapLayout, current_room_id: int | None = None, monster_room_ids: set[int] | None = None) -> None:
        self.console.print(Panel(
            self.build(layout, current_room_id, monster_room_ids),
            title="World Map",
            border_style="cyan",
            box=box.ROUNDED,
        ))
