"""
SQLite blob store adapter.

Implements BlobStorePort on a single key-value table. Opens a connection
per operation unless an external connection is supplied (tests, shared
transactions). sqlite3 errors surface as PersistenceError.
"""

from __future__ import annotations

import sqlite3
from datetime import UTC, datetime

from fiprofile.core.errors import PersistenceError

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""


class SQLiteBlobStore:
    """SQLite implementation of BlobStorePort."""

    def __init__(self, db_path: str, connection: sqlite3.Connection | None = None):
        self.db_path = db_path
        self._external_conn = connection
        self._ensure_schema()

    def _get_conn(self) -> sqlite3.Connection:
        """Get database connection (uses external if provided)."""
        if self._external_conn is not None:
            return self._external_conn
        return sqlite3.connect(self.db_path)

    def _should_close(self) -> bool:
        """Whether to close connection after use."""
        return self._external_conn is None

    def _ensure_schema(self) -> None:
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise PersistenceError("open", self.db_path, e) from e
        try:
            conn.execute(SCHEMA)
            conn.commit()
        except sqlite3.Error as e:
            raise PersistenceError("create schema", self.db_path, e) from e
        finally:
            if self._should_close():
                conn.close()

    def get(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
            return row[0] if row else None
        except sqlite3.Error as e:
            raise PersistenceError("get", key, e) from e
        finally:
            if self._should_close():
                conn.close()

    def set(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value, datetime.now(UTC).isoformat()),
            )
            if self._should_close():
                conn.commit()
        except sqlite3.Error as e:
            raise PersistenceError("set", key, e) from e
        finally:
            if self._should_close():
                conn.close()

    def remove(self, key: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            if self._should_close():
                conn.commit()
        except sqlite3.Error as e:
            raise PersistenceError("remove", key, e) from e
        finally:
            if self._should_close():
                conn.close()
