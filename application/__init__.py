"""Application layer - Services and use cases."""
from .services import LeaderboardService
from .use_cases import RefreshLeaderboardUseCase

__all__ = [
    'LeaderboardService',
    'RefreshLeaderboardUseCase',
]
