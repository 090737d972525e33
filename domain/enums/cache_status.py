"""Cache lookup status enumeration."""
from enum import Enum


class CacheStatus(Enum):
    """Three-state cache read: a value, a cached "no match", or nothing."""

    HIT = "hit"
    HIT_NOT_FOUND = "hit_not_found"
    MISS = "miss"
