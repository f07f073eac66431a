from __future__ import annotations

import sqlite3

_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS rooms (
    id           INTEGER PRIMARY KEY,
    name         TEXT NOT NULL,
    description  TEXT NOT NULL DEFAULT '',
    x            INTEGER NOT NULL,
    y            INTEGER NOT NULL,
    north_id     INTEGER REFERENCES rooms(id) DEFERRABLE INITIALLY DEFERRED,
    south_id     INTEGER REFERENCES rooms(id) DEFERRABLE INITIALLY DEFERRED,
    east_id      INTEGER REFERENCES rooms(id) DEFERRABLE INITIALLY DEFERRED,
    west_id      INTEGER REFERENCES rooms(id) DEFERRABLE INITIALLY DEFERRED,
    UNIQUE(x, y)
);

CREATE TABLE IF NOT EXISTS items (
    id         INTEGER PRIMARY KEY,
    name       TEXT NOT NULL,
    item_type  TEXT NOT NULL DEFAULT 'other',
    attack     INTEGER NOT NULL DEFAULT 0,
    defense    INTEGER NOT NULL DEFAULT 0,
    weight     REAL NOT NULL DEFAULT 0,
    value      INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS abilities (
    id           INTEGER PRIMARY KEY,
    name         TEXT NOT NULL,
    description  TEXT NOT NULL DEFAULT '',
    kind         TEXT NOT NULL,
    damage       INTEGER NOT NULL DEFAULT 0,
    distance     INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS players (
    id          INTEGER PRIMARY KEY,
    name        TEXT NOT NULL,
    health      INTEGER NOT NULL,
    max_health  INTEGER NOT NULL DEFAULT 100,
    level       INTEGER NOT NULL DEFAULT 1,
    experience  INTEGER NOT NULL DEFAULT 0,
    room_id     INTEGER REFERENCES rooms(id),
    weapon_id   INTEGER REFERENCES items(id),
    armor_id    INTEGER REFERENCES items(id)
);

CREATE TABLE IF NOT EXISTS player_abilities (
    player_id   INTEGER NOT NULL REFERENCES players(id) ON DELETE CASCADE,
    ability_id  INTEGER NOT NULL REFERENCES abilities(id),
    PRIMARY KEY (player_id, ability_id)
);

CREATE TABLE IF NOT EXISTS inventories (
    id         INTEGER PRIMARY KEY,
    player_id  INTEGER NOT NULL UNIQUE REFERENCES players(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS inventory_items (
    inventory_id  INTEGER NOT NULL REFERENCES inventories(id) ON DELETE CASCADE,
    item_id       INTEGER NOT NULL REFERENCES items(id),
    PRIMARY KEY (inventory_id, item_id)
);

CREATE TABLE IF NOT EXISTS monsters (
    id                INTEGER PRIMARY KEY,
    name              TEXT NOT NULL,
    kind              TEXT NOT NULL,
    health            INTEGER NOT NULL,
    aggression_level  INTEGER NOT NULL DEFAULT 1,
    armor_class       INTEGER NOT NULL DEFAULT 0,
    sneakiness        INTEGER NOT NULL DEFAULT 0,
    room_id           INTEGER REFERENCES rooms(id)
);

CREATE INDEX IF NOT EXISTS idx_players_room ON players(room_id);
CREATE INDEX IF NOT EXISTS idx_monsters_room ON monsters(room_id);
"""


def upgrade(conn: sqlite3.Connection) -> None:
    """Execute the initial schema migration."""
    conn.executescript(_SCHEMA_SQL)
