from __future__ import annotations

import contextlib
import importlib
import logging
import pathlib
import sqlite3
from typing import Generator

from console_rpg.errors import PersistenceError

logger = logging.getLogger(__name__)

_MIGRATIONS = [
    "001_initial",
    "002_monster_loot",
]


class Database:
    """Main database manager for the game's storage layer."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None
        self._depth = 0
        if db_path != ":memory:":
            pathlib.Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    def initialize(self) -> None:
        """Run migrations to create all tables, skipping already-applied ones."""
        conn = self._get_raw_connection()
        conn.execute(
            "CREATE TABLE IF NOT EXISTS schema_version "
            "(version INTEGER PRIMARY KEY)"
        )
        applied = {
            r[0] for r in conn.execute("SELECT version FROM schema_version").fetchall()
        }
        for i, name in enumerate(_MIGRATIONS, 1):
            if i not in applied:
                mod = importlib.import_module(f"console_rpg.storage.migrations.{name}")
                mod.upgrade(conn)
                conn.execute("INSERT INTO schema_version VALUES (?)", (i,))
                logger.info("Applied migration %s", name)
        conn.commit()

    def _get_raw_connection(self) -> sqlite3.Connection:
        """Return the shared connection, creating it if needed."""
        if self._connection is None:
            self._connection = sqlite3.connect(self.db_path)
            self._connection.row_factory = sqlite3.Row
            self._connection.execute("PRAGMA journal_mode=WAL")
            self._connection.execute("PRAGMA foreign_keys=ON")
        return self._connection

    @contextlib.contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Context manager that yields a database connection.

        Commits on success, rolls back on exception. Inside
        :meth:`transaction` the commit is left to the outermost block.
        sqlite errors are re-raised as PersistenceError.
        """
        conn = self._get_raw_connection()
        self._depth += 1
        try:
            yield conn
            if self._depth == 1:
                conn.commit()
        except sqlite3.Error as e:
            if self._depth == 1:
                conn.rollback()
            raise PersistenceError(str(e)) from e
        except Exception:
            if self._depth == 1:
                conn.rollback()
            raise
        finally:
            self._depth -= 1

    def transaction(self) -> contextlib.AbstractContextManager[sqlite3.Connection]:
        """Group several repository calls into a single commit."""
        return self.get_connection()

    def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
