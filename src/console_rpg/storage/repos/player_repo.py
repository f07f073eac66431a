from __future__ import annotations

import sqlite3
from typing import Any

from console_rpg.models.character import Player
from console_rpg.models.item import Equipment, Inventory, Item
from console_rpg.storage.database import Database

_ATTRIBUTE_COLUMNS = frozenset({"level", "health", "experience"})


def _load_item(conn: sqlite3.Connection, item_id: int | None) -> Item | None:
    if item_id is None:
        return None
    row = conn.execute("SELECT * FROM items WHERE id = ?", (item_id,)).fetchone()
    return Item.model_validate(dict(row)) if row else None


def _load_inventory(conn: sqlite3.Connection, player_id: int) -> Inventory | None:
    inv = conn.execute(
        "SELECT id FROM inventories WHERE player_id = ?", (player_id,)
    ).fetchone()
    if inv is None:
        return None
    rows = conn.execute(
        "SELECT i.* FROM inventory_items ii JOIN items i ON i.id = ii.item_id "
        "WHERE ii.inventory_id = ? ORDER BY i.name",
        (inv["id"],),
    ).fetchall()
    return Inventory(
        id=inv["id"],
        player_id=player_id,
        items=[Item.model_validate(dict(r)) for r in rows],
    )


def _hydrate(conn: sqlite3.Connection, row: Any) -> Player:
    """Build a Player aggregate from its row plus equipment, abilities and inventory."""
    data = dict(row)
    weapon_id = data.pop("weapon_id", None)
    armor_id = data.pop("armor_id", None)
    data["equipment"] = Equipment(
        weapon=_load_item(conn, weapon_id),
        armor=_load_item(conn, armor_id),
    )
    ability_rows = conn.execute(
        "SELECT ability_id FROM player_abilities WHERE player_id = ?", (data["id"],)
    ).fetchall()
    data["ability_ids"] = {r[0] for r in ability_rows}
    data["inventory"] = _load_inventory(conn, data["id"])
    return Player.model_validate(data)


class PlayerRepo:
    """Repository for player characters and everything they own."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def save(self, player: Player) -> None:
        """Insert or update a player with equipment, learned abilities and inventory."""
        data = {
            "id": player.id,
            "name": player.name,
            "health": player.health,
            "max_health": player.max_health,
            "level": player.level,
            "experience": player.experience,
            "room_id": player.room_id,
            "weapon_id": player.equipment.weapon.id if player.equipment.weapon else None,
            "armor_id": player.equipment.armor.id if player.equipment.armor else None,
        }
        columns = ", ".join(data.keys())
        placeholders = ", ".join("?" for _ in data)
        updates = ", ".join(f"{k} = excluded.{k}" for k in data if k != "id")
        sql = (
            f"INSERT INTO players ({columns}) VALUES ({placeholders}) "
            f"ON CONFLICT(id) DO UPDATE SET {updates}"
        )
        with self.db.get_connection() as conn:
            conn.execute(sql, list(data.values()))
            conn.execute("DELETE FROM player_abilities WHERE player_id = ?", (player.id,))
            conn.executemany(
                "INSERT INTO player_abilities (player_id, ability_id) VALUES (?, ?)",
                [(player.id, a) for a in sorted(player.ability_ids)],
            )
            if player.inventory is not None:
                self._save_inventory(conn, player.inventory)

    def _save_inventory(self, conn: sqlite3.Connection, inventory: Inventory) -> None:
        if inventory.id is None:
            cur = conn.execute(
                "INSERT INTO inventories (player_id) VALUES (?)", (inventory.player_id,)
            )
            inventory.id = cur.lastrowid
        conn.execute("DELETE FROM inventory_items WHERE inventory_id = ?", (inventory.id,))
        conn.executemany(
            "INSERT OR IGNORE INTO inventory_items (inventory_id, item_id) VALUES (?, ?)",
            [(inventory.id, item.id) for item in inventory.items],
        )

    def get(self, player_id: int) -> Player | None:
        """Fetch a player aggregate by id."""
        with self.db.get_connection() as conn:
            row = conn.execute("SELECT * FROM players WHERE id = ?", (player_id,)).fetchone()
            if row is None:
                return None
            return _hydrate(conn, row)

    def get_first(self) -> Player | None:
        with self.db.get_connection() as conn:
            row = conn.execute("SELECT * FROM players ORDER BY id LIMIT 1").fetchone()
            if row is None:
                return None
            return _hydrate(conn, row)

    def get_all(self) -> list[Player]:
        with self.db.get_connection() as conn:
            rows = conn.execute("SELECT * FROM players ORDER BY id").fetchall()
            return [_hydrate(conn, r) for r in rows]

    def get_by_room(self, room_id: int) -> list[Player]:
        """Return all players in a room."""
        with self.db.get_connection() as conn:
            rows = conn.execute(
                "SELECT * FROM players WHERE room_id = ? ORDER BY name", (room_id,)
            ).fetchall()
            return [_hydrate(conn, r) for r in rows]

    def get_by_room_with_attribute_above(self, room_id: int, attribute: str, threshold: int) -> list[Player]:
        """Players in a room whose level, health or experience exceeds ``threshold``."""
        if attribute not in _ATTRIBUTE_COLUMNS:
            raise ValueError(f"Cannot filter players by {attribute!r}")
        with self.db.get_connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM players WHERE room_id = ? AND {attribute} > ? ORDER BY name",
                (room_id, threshold),
            ).fetchall()
            return [_hydrate(conn, r) for r in rows]

    def find_by_equipment_name(self, search: str) -> list[Player]:
        """Players whose equipped weapon or armor name contains ``search`` (case-insensitive)."""
        pattern = f"%{search.lower()}%"
        with self.db.get_connection() as conn:
            rows = conn.execute(
                "SELECT DISTINCT p.* FROM players p "
                "LEFT JOIN items w ON w.id = p.weapon_id "
                "LEFT JOIN items a ON a.id = p.armor_id "
                "WHERE lower(w.name) LIKE ? OR lower(a.name) LIKE ? "
                "ORDER BY p.name",
                (pattern, pattern),
            ).fetchall()
            return [_hydrate(conn, r) for r in rows]

    def search_by_name(self, search: str) -> list[Player]:
        """Players whose name contains ``search`` (case-insensitive)."""
        with self.db.get_connection() as conn:
            rows = conn.execute(
                "SELECT * FROM players WHERE lower(name) LIKE ? ORDER BY name",
                (f"%{search.lower()}%",),
            ).fetchall()
            return [_hydrate(conn, r) for r in rows]

    def learn_ability(self, player_id: int, ability_id: int) -> bool:
        """Add an ability to a player's learned set. Returns False if already known."""
        with self.db.get_connection() as conn:
            cur = conn.execute(
                "INSERT OR IGNORE INTO player_abilities (player_id, ability_id) VALUES (?, ?)",
                (player_id, ability_id),
            )
            return cur.rowcount == 1

    def next_id(self) -> int:
        with self.db.get_connection() as conn:
            row = conn.execute("SELECT COALESCE(MAX(id), 0) + 1 FROM players").fetchone()
        return row[0]
