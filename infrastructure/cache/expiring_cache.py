"""TTL cache over a local key-value store."""
from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from core.logging.logger import get_logger
from domain.enums import CacheStatus
from domain.interfaces import IKeyValueStore

logger = get_logger(__name__, service="cache")

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheLookup:
    status: CacheStatus
    value: Any = None

    @property
    def is_hit(self) -> bool:
        """True for a stored value and for a stored "not found"."""
        return self.status is not CacheStatus.MISS


_MISS = CacheLookup(CacheStatus.MISS)


class ExpiringCache:
    """
    Maps a key to a JSON-serializable value plus an expiry timestamp.

    Entries are written to the store as ``{"value": ..., "expiry": <epoch ms>}``.
    An entry is valid while ``now < expiry``; expired entries are removed when
    read. There is no background sweep and no capacity bound.

    A stored ``None`` is a cached negative result and reads back as
    ``CacheStatus.HIT_NOT_FOUND`` so callers can skip the upstream request.
    """

    def __init__(self, store: IKeyValueStore, clock: Optional[Clock] = None) -> None:
        self.store = store
        self._clock = clock or time.time

    def now_ms(self) -> int:
        return int(self._clock() * 1000)

    def set(self, key: str, value: Any, ttl_ms: int) -> None:
        entry = {"value": value, "expiry": self.now_ms() + int(ttl_ms)}
        self.store.set(key, json.dumps(entry, separators=(",", ":")))

    def lookup(self, key: str) -> CacheLookup:
        raw = self.store.get(key)
        if raw is None:
            return _MISS
        try:
            entry = json.loads(raw)
            expiry = int(entry["expiry"])
        except (ValueError, TypeError, KeyError) as e:
            logger.warning(lambda: f"cache-entry-corrupt {key}: {e}")
            self.store.remove(key)
            return _MISS
        if self.now_ms() >= expiry:
            logger.debug(lambda: f"cache-expired {key}")
            self.store.remove(key)
            return _MISS
        value = entry.get("value")
        if value is None:
            return CacheLookup(CacheStatus.HIT_NOT_FOUND)
        return CacheLookup(CacheStatus.HIT, value)

    def get(self, key: str) -> Any:
        """Return the live value for ``key`` or None."""
        return self.lookup(key).value

    def clear(self, key: str) -> None:
        self.store.remove(key)

    def keys(self, prefix: str = "") -> List[str]:
        return self.store.keys(prefix)

    def clear_matching(self, predicate: Callable[[str], bool]) -> int:
        """Remove every key ``predicate`` accepts; returns how many."""
        keys = [k for k in self.keys() if predicate(k)]
        for key in keys:
            self.store.remove(key)
        return len(keys)
