"""Expiring cache and its persistence stores."""
from .expiring_cache import CacheLookup, ExpiringCache
from .keys import PLAYER_PREFIX, PLAYER_STATS_PREFIX, ROSTER_KEY, is_leaderboard_key, player_key, player_stats_key
from .stores import CacheError, MemoryStore, SQLiteStore, create_store

__all__ = [
    'CacheLookup',
    'ExpiringCache',
    'CacheError',
    'MemoryStore',
    'SQLiteStore',
    'create_store',
    'is_leaderboard_key',
    'ROSTER_KEY',
    'PLAYER_PREFIX',
    'PLAYER_STATS_PREFIX',
    'player_key',
    'player_stats_key',
]
