"""Presentation layer - User interfaces."""
from .cli import ClearCacheCommand, LeaderboardCommand

__all__ = [
    "LeaderboardCommand",
    "ClearCacheCommand",
]
