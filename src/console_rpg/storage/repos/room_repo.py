from __future__ import annotations

from console_rpg.models.room import Room
from console_rpg.storage.database import Database


class RoomRepo:
    """Repository for room records and their exits."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def save(self, room: Room) -> None:
        """Insert or update a room record (UPSERT)."""
        data = room.model_dump()
        columns = ", ".join(data.keys())
        placeholders = ", ".join("?" for _ in data)
        updates = ", ".join(f"{k} = excluded.{k}" for k in data if k != "id")
        sql = (
            f"INSERT INTO rooms ({columns}) VALUES ({placeholders}) "
            f"ON CONFLICT(id) DO UPDATE SET {updates}"
        )
        with self.db.get_connection() as conn:
            conn.execute(sql, list(data.values()))

    def get(self, room_id: int) -> Room | None:
        """Fetch a room by id."""
        with self.db.get_connection() as conn:
            row = conn.execute("SELECT * FROM rooms WHERE id = ?", (room_id,)).fetchone()
        return Room.model_validate(dict(row)) if row else None

    def get_all(self) -> list[Room]:
        """Return every room, ordered by id."""
        with self.db.get_connection() as conn:
            rows = conn.execute("SELECT * FROM rooms ORDER BY id").fetchall()
        return [Room.model_validate(dict(r)) for r in rows]

    def get_first(self) -> Room | None:
        with self.db.get_connection() as conn:
            row = conn.execute("SELECT * FROM rooms ORDER BY id LIMIT 1").fetchone()
        return Room.model_validate(dict(row)) if row else None

    def count(self) -> int:
        with self.db.get_connection() as conn:
            row = conn.execute("SELECT COUNT(*) FROM rooms").fetchone()
        return row[0] if row else 0
