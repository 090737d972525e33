"""Infrastructure layer - API client, cache and repositories."""
from .api import APIError, NetworkError, ParseError, RateLimitedError, TrackerAPIClient
from .cache import CacheError, ExpiringCache, MemoryStore, SQLiteStore, create_store
from .repositories import PlayerRepository, PlayerStatsRepository, RosterRepository

__all__ = [
    'TrackerAPIClient',
    'APIError',
    'NetworkError',
    'ParseError',
    'RateLimitedError',
    'ExpiringCache',
    'CacheError',
    'MemoryStore',
    'SQLiteStore',
    'create_store',
    'RosterRepository',
    'PlayerRepository',
    'PlayerStatsRepository',
]
