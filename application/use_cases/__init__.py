"""Application use cases."""
from .refresh_leaderboard import RefreshLeaderboardUseCase

__all__ = [
    'RefreshLeaderboardUseCase',
]
