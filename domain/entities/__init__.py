"""Domain entities."""
from .roster_member import RosterMember
from .breacher_player import BreacherPlayer
from .player_stats import PlayerStats, calculate_kd, round_half_away_from_zero, total_kills
from .resolution import Resolution
from .leaderboard_report import LeaderboardReport

__all__ = [
    'RosterMember',
    'BreacherPlayer',
    'PlayerStats',
    'Resolution',
    'LeaderboardReport',
    'calculate_kd',
    'round_half_away_from_zero',
    'total_kills',
]
