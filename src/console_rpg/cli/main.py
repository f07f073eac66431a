"""Typer CLI application."""
from __future__ import annotations

from typing import Optional

import typer

from console_rpg.errors import GameError

app = typer.Typer(
    name="console-rpg",
    help="A turn-based console RPG: explore rooms, fight monsters, level up.",
    no_args_is_help=False,
)

_config_option = typer.Option(None, "--config", "-c", help="Path to config.toml")
_db_option = typer.Option(None, "--db", help="Override the database path")


def _app(config: Optional[str], db: Optional[str]):
    from console_rpg.app import GameApp
    from console_rpg.logging_setup import configure_logging

    game_app = GameApp(config_path=config, db_path=db)
    configure_logging(game_app.config)
    return game_app


@app.command()
def play(
    player: Optional[int] = typer.Option(None, "--player", "-p", help="Character id to play"),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """Start or continue your adventure."""
    game_app = _app(config, db)
    try:
        game_app.play(player)
    finally:
        game_app.close()


@app.command()
def init(config: Optional[str] = _config_option, db: Optional[str] = _db_option) -> None:
    """Create the database and seed the starter world."""
    game_app = _app(config, db)
    try:
        if game_app.ensure_world():
            game_app.display.info("World seeded.")
        else:
            game_app.display.info("World already exists; nothing to do.")
    finally:
        game_app.close()


@app.command("map")
def show_map(
    player: Optional[int] = typer.Option(None, "--player", "-p", help="Mark this character's room"),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """Print the world map."""
    from console_rpg.mechanics.room_graph import RoomGraph

    game_app = _app(config, db)
    try:
        repos = game_app.repos
        current = repos["players"].get(player) if player is not None else None
        graph = RoomGraph(repos["rooms"].get_all())
        game_app.map_display.render(
            graph.layout(),
            current.room_id if current else None,
            repos["monsters"].rooms_with_monsters(),
        )
    finally:
        game_app.close()


@app.command("add-room")
def add_room(
    source: int = typer.Argument(..., help="Id of the existing room"),
    direction: str = typer.Argument(..., help="north, south, east or west"),
    name: str = typer.Argument(..., help="Name of the new room"),
    description: str = typer.Option("", "--description", "-d"),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """Create a room next to an existing one."""
    game_app = _app(config, db)
    try:
        room = game_app.author.create_room(source, direction, name, description)
        game_app.display.info(f"Room '{room.name}' created at ({room.x}, {room.y}) with id {room.id}.")
    except GameError as e:
        game_app.display.error(str(e))
        raise typer.Exit(code=1)
    finally:
        game_app.close()


@app.command("add-character")
def add_character(
    name: str = typer.Argument(...),
    health: int = typer.Option(100, "--health", min=1),
    room: Optional[int] = typer.Option(None, "--room", help="Starting room id"),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """Create a new character."""
    game_app = _app(config, db)
    try:
        player = game_app.author.add_character(name, health, room)
        game_app.display.info(f"Character '{player.name}' created with id {player.id}.")
    except GameError as e:
        game_app.display.error(str(e))
        raise typer.Exit(code=1)
    finally:
        game_app.close()


@app.command()
def learn(
    player: int = typer.Argument(..., help="Character id"),
    ability: int = typer.Argument(..., help="Ability id"),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """Teach a character an ability."""
    game_app = _app(config, db)
    try:
        game_app.display.info(game_app.author.learn_ability(player, ability))
    except GameError as e:
        game_app.display.error(str(e))
        raise typer.Exit(code=1)
    finally:
        game_app.close()


@app.command("place-monster")
def place_monster(
    kind: str = typer.Argument(..., help="goblin, beast, undead or bandit"),
    name: str = typer.Argument(...),
    room: int = typer.Argument(..., help="Room id"),
    health: int = typer.Option(20, "--health", min=1),
    aggression: int = typer.Option(1, "--aggression", min=0),
    armor_class: Optional[int] = typer.Option(None, "--armor-class"),
    loot: Optional[int] = typer.Option(None, "--loot", help="Item id dropped on death"),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """Put a monster in a room."""
    game_app = _app(config, db)
    try:
        monster = game_app.author.place_monster(kind.lower(), name, room, health, aggression, armor_class, loot)
        game_app.display.info(f"{monster.name} now lurks in room {room}.")
    except GameError as e:
        game_app.display.error(str(e))
        raise typer.Exit(code=1)
    finally:
        game_app.close()


@app.command("edit-character")
def edit_character(
    player: int = typer.Argument(..., help="Character id"),
    name: Optional[str] = typer.Option(None, "--name"),
    health: Optional[int] = typer.Option(None, "--health", min=0),
    experience: Optional[int] = typer.Option(None, "--experience", min=0),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """Change a character's name, health or experience."""
    game_app = _app(config, db)
    try:
        if name is None and health is None and experience is None:
            game_app.display.error("Nothing to change: pass --name, --health or --experience.")
            raise typer.Exit(code=1)
        updated = game_app.author.edit_character(player, name, health, experience)
        game_app.display.info(f"Character '{updated.name}' updated successfully!")
    except GameError as e:
        game_app.display.error(str(e))
        raise typer.Exit(code=1)
    finally:
        game_app.close()


@app.command()
def characters(
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Only names containing this text"),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """List all characters, or search them by name."""
    game_app = _app(config, db)
    try:
        if name is None:
            game_app.display.show_characters(game_app.author.all_characters())
        else:
            game_app.display.show_characters(
                game_app.author.search_characters(name), title=f"Characters matching '{name}'",
            )
    finally:
        game_app.close()


@app.command()
def abilities(
    player: Optional[int] = typer.Argument(None, help="Character id; omit to list every ability"),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """Show the abilities a character has learned, or the full catalog."""
    game_app = _app(config, db)
    try:
        if player is None:
            game_app.display.show_abilities(game_app.author.ability_catalog())
        else:
            owner, learned = game_app.author.character_abilities(player)
            game_app.display.show_abilities(learned, title=f"Abilities for {owner.name}")
    except GameError as e:
        game_app.display.error(str(e))
        raise typer.Exit(code=1)
    finally:
        game_app.close()


@app.command()
def room(
    room_id: int = typer.Argument(..., help="Room id"),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """Show a room's exits, characters and monsters."""
    game_app = _app(config, db)
    try:
        game_app.display.show_room_details(game_app.author.room_details(room_id))
    except GameError as e:
        game_app.display.error(str(e))
        raise typer.Exit(code=1)
    finally:
        game_app.close()


@app.command()
def rooms(config: Optional[str] = _config_option, db: Optional[str] = _db_option) -> None:
    """List every room with the characters and monsters in it."""
    game_app = _app(config, db)
    try:
        game_app.display.show_rooms(game_app.author.rooms_with_inhabitants())
    finally:
        game_app.close()


@app.command()
def players(
    room: int = typer.Argument(..., help="Room id"),
    attribute: str = typer.Option("level", "--attribute", "-a", help="level, health or experience"),
    above: int = typer.Option(0, "--above"),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """List characters in a room whose attribute exceeds a threshold."""
    game_app = _app(config, db)
    try:
        found = game_app.author.players_in_room_above(room, attribute, above)
        game_app.display.show_players(found, title=f"Room {room}: {attribute} > {above}")
    except ValueError as e:
        game_app.display.error(str(e))
        raise typer.Exit(code=1)
    finally:
        game_app.close()


@app.command("find-gear")
def find_gear(
    search: str = typer.Argument(..., help="Part of an item name"),
    config: Optional[str] = _config_option,
    db: Optional[str] = _db_option,
) -> None:
    """Find which characters have matching equipment, and where they are."""
    game_app = _app(config, db)
    try:
        game_app.display.show_equipment_matches(game_app.author.find_equipment(search))
    finally:
        game_app.close()


if __name__ == "__main__":
    app()
