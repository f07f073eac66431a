"""Tests for src/console_rpg/storage/database.py."""
from __future__ import annotations

import pytest

from console_rpg.errors import PersistenceError
from console_rpg.storage.database import _MIGRATIONS


class TestDatabaseInitialize:
    def test_all_migrations_applied(self, in_memory_db):
        with in_memory_db.get_connection() as conn:
            versions = {
                r[0] for r in conn.execute("SELECT version FROM schema_version").fetchall()
            }
        assert versions == set(range(1, len(_MIGRATIONS) + 1))

    def test_idempotent_rerun(self, in_memory_db):
        in_memory_db.initialize()
        with in_memory_db.get_connection() as conn:
            versions = conn.execute("SELECT count(*) FROM schema_version").fetchone()[0]
        assert versions == len(_MIGRATIONS)

    def test_key_tables_exist(self, in_memory_db):
        expected_tables = [
            "rooms", "items", "abilities", "players", "player_abilities",
            "inventories", "inventory_items", "monsters",
        ]
        with in_memory_db.get_connection() as conn:
            tables = {
                r[0] for r in conn.execute(
                    "SELECT name FROM sqlite_master WHERE type='table'"
                ).fetchall()
            }
        for table in expected_tables:
            assert table in tables, f"Missing table: {table}"

    def test_monsters_have_loot_column(self, in_memory_db):
        with in_memory_db.get_connection() as conn:
            columns = {r[1] for r in conn.execute("PRAGMA table_info(monsters)").fetchall()}
        assert "loot_item_id" in columns


class TestGetConnection:
    def test_commits_on_success(self, in_memory_db):
        with in_memory_db.get_connection() as conn:
            conn.execute("INSERT INTO items (id, name) VALUES (1, 'Torch')")
        with in_memory_db.get_connection() as conn:
            row = conn.execute("SELECT name FROM items WHERE id = 1").fetchone()
        assert row["name"] == "Torch"

    def test_rollback_on_error(self, in_memory_db):
        with pytest.raises(RuntimeError):
            with in_memory_db.get_connection() as conn:
                conn.execute("INSERT INTO items (id, name) VALUES (2, 'Rope')")
                raise RuntimeError("boom")
        with in_memory_db.get_connection() as conn:
            row = conn.execute("SELECT id FROM items WHERE id = 2").fetchone()
        assert row is None

    def test_sqlite_errors_become_persistence_errors(self, in_memory_db):
        with pytest.raises(PersistenceError):
            with in_memory_db.get_connection() as conn:
                conn.execute("INSERT INTO no_such_table VALUES (1)")


class TestTransaction:
    def test_nested_connections_commit_once(self, in_memory_db):
        with pytest.raises(RuntimeError):
            with in_memory_db.transaction():
                with in_memory_db.get_connection() as conn:
                    conn.execute("INSERT INTO items (id, name) VALUES (3, 'Lamp')")
                raise RuntimeError("abort after inner block")
        with in_memory_db.get_connection() as conn:
            row = conn.execute("SELECT id FROM items WHERE id = 3").fetchone()
        assert row is None

    def test_commits_at_outer_exit(self, in_memory_db):
        with in_memory_db.transaction():
            with in_memory_db.get_connection() as conn:
                conn.execute("INSERT INTO items (id, name) VALUES (4, 'Key')")
            with in_memory_db.get_connection() as conn:
                conn.execute("INSERT INTO items (id, name) VALUES (5, 'Map')")
        with in_memory_db.get_connection() as conn:
            count = conn.execute("SELECT count(*) FROM items").fetchone()[0]
        assert count == 2
