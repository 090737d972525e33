from __future__ import annotations

from typing import Optional

from config import settings
from core.logging.logger import get_logger
from domain.interfaces import IKeyValueStore
from infrastructure import CacheError, ExpiringCache, create_store
from infrastructure.cache import is_leaderboard_key


class ClearCacheCommand:
    """Drops cached roster, player and stats lookups."""

    def __init__(self, store: Optional[IKeyValueStore] = None) -> None:
        self.log = get_logger(__name__, service="cache-cli")
        self._store = store

    def run(self, *, confirm: bool = False) -> int:
        if not confirm:
            answer = input("Type 'YES' to clear all cached lookups: ").strip()
            if answer != "YES":
                print("Not confirmed.")
                return 0
        store = self._store if self._store is not None else create_store(settings.CACHE_BACKEND, settings.cache_db_path())
        try:
            removed = ExpiringCache(store).clear_matching(is_leaderboard_key)
        except CacheError as e:
            self.log.error(lambda: f"clear-cache-failed {e}")
            print(f"Error: {e}")
            return 0
        finally:
            if self._store is None:
                store.close()
        self.log.success(lambda: f"clear-cache-ok entries={removed}")
        print(f"Cleared {removed} cached entries.")
        return removed
