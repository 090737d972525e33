"""Infrastructure repositories module."""
from .roster_repository import RosterRepository
from .player_repository import PlayerRepository
from .player_stats_repository import PlayerStatsRepository

__all__ = [
    'RosterRepository',
    'PlayerRepository',
    'PlayerStatsRepository',
]
