from __future__ import annotations

from console_rpg.models.monster import MonsterBase, parse_monster
from console_rpg.storage.database import Database

_COLUMNS = (
    "id", "name", "kind", "health", "aggression_level",
    "armor_class", "sneakiness", "room_id", "loot_item_id",
)


def _serialize(monster: MonsterBase) -> dict:
    data = monster.model_dump()
    data.setdefault("sneakiness", 0)
    return {k: data.get(k) for k in _COLUMNS}


class MonsterRepo:
    """Repository for monsters, stored as one table keyed by ``kind``."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def save(self, monster: MonsterBase) -> None:
        """Insert or update a monster record (UPSERT)."""
        data = _serialize(monster)
        columns = ", ".join(data.keys())
        placeholders = ", ".join("?" for _ in data)
        updates = ", ".join(f"{k} = excluded.{k}" for k in data if k != "id")
        sql = (
            f"INSERT INTO monsters ({columns}) VALUES ({placeholders}) "
            f"ON CONFLICT(id) DO UPDATE SET {updates}"
        )
        with self.db.get_connection() as conn:
            conn.execute(sql, list(data.values()))

    def get(self, monster_id: int) -> MonsterBase | None:
        """Fetch a monster by id as its concrete variant."""
        with self.db.get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM monsters WHERE id = ?", (monster_id,)
            ).fetchone()
        return parse_monster(dict(row)) if row else None

    def get_by_room(self, room_id: int) -> list[MonsterBase]:
        """Return all monsters in a room."""
        with self.db.get_connection() as conn:
            rows = conn.execute(
                "SELECT * FROM monsters WHERE room_id = ? ORDER BY id", (room_id,)
            ).fetchall()
        return [parse_monster(dict(r)) for r in rows]

    def get_all(self) -> list[MonsterBase]:
        with self.db.get_connection() as conn:
            rows = conn.execute("SELECT * FROM monsters ORDER BY id").fetchall()
        return [parse_monster(dict(r)) for r in rows]

    def rooms_with_monsters(self) -> set[int]:
        """Ids of rooms that currently hold at least one monster."""
        with self.db.get_connection() as conn:
            rows = conn.execute(
                "SELECT DISTINCT room_id FROM monsters WHERE room_id IS NOT NULL"
            ).fetchall()
        return {r[0] for r in rows}

    def next_id(self) -> int:
        with self.db.get_connection() as conn:
            row = conn.execute("SELECT COALESCE(MAX(id), 0) + 1 FROM monsters").fetchone()
        return row[0]

    def delete(self, monster_id: int) -> None:
        """Delete a monster by id."""
        with self.db.get_connection() as conn:
            conn.execute("DELETE FROM monsters WHERE id = ?", (monster_id,))
