"""Application services root exports."""
from .leaderboard_service import LeaderboardService

__all__ = [
    "LeaderboardService",
]
