"""Presentation CLI exports."""
from .leaderboard_command import LeaderboardCommand, format_json, format_table
from .clear_cache_command import ClearCacheCommand

__all__ = [
    "LeaderboardCommand",
    "ClearCacheCommand",
    "format_table",
    "format_json",
]
