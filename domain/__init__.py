"""Domain layer - Business entities, enums, and interfaces."""
from .entities import BreacherPlayer, LeaderboardReport, PlayerStats, Resolution, RosterMember
from .enums import CacheStatus, Outcome
from .interfaces import IKeyValueStore, IPlayerRepository, IPlayerStatsRepository, IRosterRepository

__all__ = [
    # Entities
    'RosterMember',
    'BreacherPlayer',
    'PlayerStats',
    'Resolution',
    'LeaderboardReport',
    # Enums
    'Outcome',
    'CacheStatus',
    # Interfaces
    'IRosterRepository',
    'IPlayerRepository',
    'IPlayerStatsRepository',
    'IKeyValueStore',
]
