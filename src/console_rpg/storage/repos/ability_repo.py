from __future__ import annotations

from typing import Iterable

from console_rpg.models.ability import AbilityBase, parse_ability
from console_rpg.storage.database import Database


class AbilityRepo:
    """Repository for ability reference data."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def save(self, ability: AbilityBase) -> None:
        """Insert or update an ability record (UPSERT)."""
        data = ability.model_dump()
        columns = ", ".join(data.keys())
        placeholders = ", ".join("?" for _ in data)
        updates = ", ".join(f"{k} = excluded.{k}" for k in data if k != "id")
        sql = (
            f"INSERT INTO abilities ({columns}) VALUES ({placeholders}) "
            f"ON CONFLICT(id) DO UPDATE SET {updates}"
        )
        with self.db.get_connection() as conn:
            conn.execute(sql, list(data.values()))

    def get(self, ability_id: int) -> AbilityBase | None:
        """Fetch an ability by id as its concrete variant."""
        with self.db.get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM abilities WHERE id = ?", (ability_id,)
            ).fetchone()
        return parse_ability(dict(row)) if row else None

    def get_many(self, ability_ids: Iterable[int]) -> list[AbilityBase]:
        ids = sorted(ability_ids)
        if not ids:
            return []
        placeholders = ", ".join("?" for _ in ids)
        with self.db.get_connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM abilities WHERE id IN ({placeholders}) ORDER BY name", ids
            ).fetchall()
        return [parse_ability(dict(r)) for r in rows]

    def get_all(self) -> list[AbilityBase]:
        with self.db.get_connection() as conn:
            rows = conn.execute("SELECT * FROM abilities ORDER BY name").fetchall()
        return [parse_ability(dict(r)) for r in rows]
