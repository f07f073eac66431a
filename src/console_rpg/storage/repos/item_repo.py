from __future__ import annotations

from typing import Iterable

from console_rpg.models.item import Item
from console_rpg.storage.database import Database


class ItemRepo:
    """Repository for item records."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def save(self, item: Item) -> None:
        """Insert or update an item record (UPSERT)."""
        data = item.model_dump(mode="json")
        columns = ", ".join(data.keys())
        placeholders = ", ".join("?" for _ in data)
        updates = ", ".join(f"{k} = excluded.{k}" for k in data if k != "id")
        sql = (
            f"INSERT INTO items ({columns}) VALUES ({placeholders}) "
            f"ON CONFLICT(id) DO UPDATE SET {updates}"
        )
        with self.db.get_connection() as conn:
            conn.execute(sql, list(data.values()))

    def get(self, item_id: int) -> Item | None:
        """Fetch an item by id."""
        with self.db.get_connection() as conn:
            row = conn.execute("SELECT * FROM items WHERE id = ?", (item_id,)).fetchone()
        return Item.model_validate(dict(row)) if row else None

    def get_many(self, item_ids: Iterable[int]) -> dict[int, Item]:
        """Fetch several items at once, keyed by id. Unknown ids are skipped."""
        ids = list(item_ids)
        if not ids:
            return {}
        placeholders = ", ".join("?" for _ in ids)
        with self.db.get_connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM items WHERE id IN ({placeholders})", ids
            ).fetchall()
        return {r["id"]: Item.model_validate(dict(r)) for r in rows}
