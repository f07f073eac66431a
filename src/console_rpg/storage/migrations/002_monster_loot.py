"""Migration 002: Monsters can carry a loot item."""
from __future__ import annotations

import sqlite3


def upgrade(conn: sqlite3.Connection) -> None:
    """Add loot_item_id column to monsters table."""
    cursor = conn.execute("PRAGMA table_info(monsters)")
    existing = {row[1] for row in cursor.fetchall()}
    if "loot_item_id" not in existing:
        conn.execute("ALTER TABLE monsters ADD COLUMN loot_item_id INTEGER REFERENCES items(id)")
