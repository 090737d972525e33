"""Domain interfaces."""
from .repository import IRosterRepository, IPlayerRepository, IPlayerStatsRepository
from .store import IKeyValueStore

__all__ = [
    'IRosterRepository',
    'IPlayerRepository',
    'IPlayerStatsRepository',
    'IKeyValueStore',
]
