"""Rich terminal display manager."""
from __future__ import annotations

from typing import Any, Callable, Iterable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from console_rpg.cli.input_handler import MENU
from console_rpg.engine.authoring import RoomDetails
from console_rpg.mechanics.abilities import describe_stats
from console_rpg.mechanics.combat import health_bar
from console_rpg.models.ability import AbilityBase
from console_rpg.models.action import ActionResult
from console_rpg.models.character import Player
from console_rpg.models.monster import MonsterBase
from console_rpg.models.room import Room

console = Console()


def health_color(current: int, maximum: int) -> str:
    """Bar color by remaining health: green above 70%, yellow above 30%."""
    pct = current / maximum * 100 if maximum > 0 else 0
    if pct > 70:
        return "green"
    if pct > 30:
        return "yellow"
    return "red"


class Display:
    def __init__(self, width: int = 80, output: Console | None = None):
        self.console = output or console
        self.width = width

    def show_title_screen(self) -> None:
        title = Text()
        title.append("CONSOLE RPG\n", style="bold cyan")
        title.append("Explore. Fight. Level up.", style="dim")
        self.console.print(Panel(title, border_style="cyan", box=box.DOUBLE, width=self.width))

    def show_room(self, room: Room, monsters: Iterable[MonsterBase] = (), players: Iterable[Player] = ()) -> None:
        content = Text()
        content.append(f"{room.name}", style="bold yellow")
        content.append(f"  ({room.x}, {room.y})\n", style="dim")
        if room.description:
            content.append(f"{room.description}\n")
        monsters = list(monsters)
        if monsters:
            content.append("\nMonsters: ", style="bold red")
            content.append(", ".join(f"{m.name} (HP: {m.health})" for m in monsters))
        others = [p.name for p in players]
        if others:
            content.append("\nAlso here: ", style="bold")
            content.append(", ".join(others))
        exits = [d for d in ("north", "south", "east", "west") if getattr(room, f"{d}_id") is not None]
        content.append("\n\nExits: ", style="bold")
        content.append(", ".join(exits) if exits else "none", style="cyan")
        self.console.print(Panel(content, border_style="yellow", box=box.ROUNDED, width=self.width))

    def show_menu(self) -> str:
        self.console.print()
        for i, action in enumerate(MENU, 1):
            self.console.print(f"  [cyan]{i:>2}.[/cyan] {action.value}")
        self.console.print("  [dim]help, quit[/dim]")
        return self.prompt()

    def prompt(self, label: str = "> ") -> str:
        return self.console.input(f"[bold cyan]{label}[/bold cyan]").strip()

    def show_choices(self, title: str, options: list[Any], label: Callable[[Any], str] = str) -> str:
        self.console.print(f"[bold]{title}[/bold]")
        for i, option in enumerate(options, 1):
            self.console.print(Text.assemble("  ", (f"{i}.", "cyan"), " ", label(option)))
        return self.prompt()

    def show_result(self, result: ActionResult) -> None:
        style = "green" if result.success else "red"
        self.console.print(Panel(
            Text(result.outcome_description),
            title=Text(result.message),
            border_style=style,
            box=box.ROUNDED,
            width=self.width,
        ))
        if result.xp_gained:
            self.console.print(f"  [cyan]+{result.xp_gained} XP[/cyan]")

    def show_combat_summary(self, player: Player, monster: MonsterBase | None = None) -> None:
        table = Table(box=box.SIMPLE_HEAVY, border_style="red", show_header=False)
        table.add_column("Name", style="bold")
        table.add_column("Health")
        table.add_row(Text(player.name), self._bar(player.health, player.max_health))
        if monster is not None and not monster.is_dead:
            # Monsters have no max health; show the raw value.
            table.add_row(Text(monster.name, style="red"), f"HP {monster.health}")
        self.console.print(table)

    def _bar(self, current: int, maximum: int) -> str:
        color = health_color(current, maximum)
        return f"[{color}]{health_bar(current, maximum)}[/{color}] {current}/{maximum}"

    def show_game_over(self, player: Player) -> None:
        self.console.print(Panel(
            Text("YOU HAVE DIED!", style="bold red", justify="center"),
            subtitle=Text(f"{player.name} - Level {player.level}"),
            border_style="red",
            box=box.DOUBLE,
            width=self.width,
        ))
        self.console.print("[dim]Your adventure has come to an end...[/dim]")

    def show_rooms(self, rooms: list[tuple[Room, list[Player], list[MonsterBase]]]) -> None:
        table = Table(title="Rooms", box=box.ROUNDED, border_style="cyan")
        table.add_column("Id", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Coords", justify="center")
        table.add_column("Players")
        table.add_column("Monsters", style="red")
        for room, players, monsters in rooms:
            table.add_row(
                str(room.id),
                Text(room.name),
                f"({room.x}, {room.y})",
                Text(", ".join(p.name for p in players)) if players else Text("-", style="dim"),
                Text(", ".join(m.name for m in monsters)) if monsters else Text("-", style="dim"),
            )
        self.console.print(table)

    def show_room_details(self, details: RoomDetails) -> None:
        room = details.room
        content = Text()
        content.append(room.name, style="bold yellow")
        content.append(f"  ({room.x}, {room.y})\n", style="dim")
        if room.description:
            content.append(f"{room.description}\n", style="dim")

        content.append("\nExits\n", style="bold cyan")
        if not details.exits:
            content.append("  No visible exits.\n", style="dim")
        for direction, neighbor in details.exits.items():
            content.append(f"  {direction.value.title()} -> {neighbor.name}\n")

        content.append("\nPlayers\n", style="bold")
        if not details.players:
            content.append("  No players present.\n", style="dim")
        for p in details.players:
            content.append(f"  {p.name} (HP: {p.health}/{p.max_health}, Level {p.level})\n")

        content.append("\nMonsters\n", style="bold red")
        if not details.monsters:
            content.append("  No monsters present.", style="dim")
        content.append("\n".join(
            f"  {m.name} (HP: {m.health}, Type: {m.kind}, AC: {m.armor_class})" for m in details.monsters
        ))
        self.console.print(Panel(content, title=f"Room {room.id}", border_style="yellow", box=box.ROUNDED, width=self.width))

    def show_characters(self, characters: list[tuple[Player, Room | None]], title: str = "Characters") -> None:
        if not characters:
            self.console.print("[yellow]No characters found.[/yellow]")
            return
        table = Table(title=title, box=box.ROUNDED, border_style="cyan")
        table.add_column("Id", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Level", justify="right")
        table.add_column("Health")
        table.add_column("XP", justify="right")
        table.add_column("Location")
        for p, room in characters:
            table.add_row(
                str(p.id),
                Text(p.name),
                str(p.level),
                self._bar(p.health, p.max_health),
                str(p.experience),
                Text(room.name) if room else Text("Unknown", style="dim"),
            )
        self.console.print(table)

    def show_abilities(self, abilities: list[AbilityBase], title: str = "Abilities") -> None:
        if not abilities:
            self.console.print("[dim]No abilities.[/dim]")
            return
        table = Table(title=title, box=box.ROUNDED, border_style="magenta")
        table.add_column("Id", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Type")
        table.add_column("Description")
        table.add_column("Stats")
        for a in abilities:
            table.add_row(str(a.id), Text(a.name), a.kind, Text(a.description), describe_stats(a))
        self.console.print(table)

    def show_players(self, players: list[Player], title: str = "Characters") -> None:
        table = Table(title=title, box=box.ROUNDED, border_style="cyan")
        table.add_column("Id", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Level", justify="right")
        table.add_column("Health")
        table.add_column("XP", justify="right")
        for p in players:
            table.add_row(str(p.id), Text(p.name), str(p.level), self._bar(p.health, p.max_health), str(p.experience))
        self.console.print(table)

    def show_equipment_matches(self, matches: list[tuple[Player, Room | None]]) -> None:
        if not matches:
            self.console.print("[yellow]No characters carry matching equipment.[/yellow]")
            return
        table = Table(title="Equipment search", box=box.ROUNDED, border_style="cyan")
        table.add_column("Character", style="bold")
        table.add_column("Weapon")
        table.add_column("Armor")
        table.add_column("Room")
        for player, room in matches:
            eq = player.equipment
            table.add_row(
                Text(player.name),
                Text(eq.weapon.name if eq.weapon else "-"),
                Text(eq.armor.name if eq.armor else "-"),
                Text(room.name) if room else Text("nowhere", style="dim"),
            )
        self.console.print(table)

    def show_help(self) -> None:
        table = Table(title="Commands", box=box.SIMPLE, show_header=False)
        table.add_column("Command", style="cyan")
        table.add_column("Effect")
        table.add_row("1-10", "Pick an entry from the menu")
        table.add_row("n / s / e / w, go <dir>", "Move")
        table.add_row("attack <monster>", "Attack a monster with your weapon")
        table.add_row("ability <name>", "Use a learned ability")
        table.add_row("equip <item>", "Equip a weapon or armor from your backpack")
        table.add_row("i, stats, map", "Inventory, character sheet, world map")
        table.add_row("quit", "Leave the game")
        self.console.print(table)

    def info(self, text: str) -> None:
        self.console.print(Text(text, style="green"))

    def error(self, text: str) -> None:
        self.console.print(Text(text, style="red"))
