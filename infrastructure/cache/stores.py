"""Local key-value stores backing the expiring cache."""
from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Dict, List, Optional

from domain.interfaces import IKeyValueStore


class CacheError(Exception):
    pass


class MemoryStore(IKeyValueStore):
    """Process-local store; entries live as long as the instance."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self, prefix: str = "") -> List[str]:
        return [k for k in self._data if k.startswith(prefix)]

    def __len__(self) -> int:
        return len(self._data)


class SQLiteStore(IKeyValueStore):
    """Single-file store so cached lookups survive between CLI runs."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(db_path))
            self._conn.execute("PRAGMA journal_mode=WAL")
            self._conn.execute("PRAGMA synchronous=NORMAL")
            self._conn.execute("CREATE TABLE IF NOT EXISTS cache (key TEXT PRIMARY KEY, value TEXT NOT NULL)")
            self._conn.commit()
        except sqlite3.Error as e:
            raise CacheError(f"SQLite error while opening cache at {db_path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        try:
            row = self._conn.execute("SELECT value FROM cache WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise CacheError(f"SQLite error while reading '{key}': {e}") from e
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            self._conn.execute(
                "INSERT INTO cache(key, value) VALUES(?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )
            self._conn.commit()
        except sqlite3.Error as e:
            raise CacheError(f"SQLite error while writing '{key}': {e}") from e

    def remove(self, key: str) -> None:
        try:
            self._conn.execute("DELETE FROM cache WHERE key = ?", (key,))
            self._conn.commit()
        except sqlite3.Error as e:
            raise CacheError(f"SQLite error while removing '{key}': {e}") from e

    def keys(self, prefix: str = "") -> List[str]:
        # substr comparison instead of LIKE: display names may contain % or _
        try:
            rows = self._conn.execute(
                "SELECT key FROM cache WHERE substr(key, 1, ?) = ? ORDER BY key",
                (len(prefix), prefix),
            ).fetchall()
        except sqlite3.Error as e:
            raise CacheError(f"SQLite error while listing keys: {e}") from e
        return [r[0] for r in rows]

    def close(self) -> None:
        self._conn.close()


def create_store(backend: str, db_path: Optional[Path] = None) -> IKeyValueStore:
    """Build the store named by ``CACHE_BACKEND``."""
    if backend == "memory":
        return MemoryStore()
    if backend == "sqlite":
        if db_path is None:
            raise CacheError("sqlite cache backend requires a database path")
        return SQLiteStore(db_path)
    raise CacheError(f"Unknown cache backend '{backend}'")
