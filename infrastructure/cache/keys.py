"""Cache key namespaces, one per resolver."""

ROSTER_KEY = "playerNames"
PLAYER_PREFIX = "breacherPlayer_"
PLAYER_STATS_PREFIX = "breacherPlayerData_"


def player_key(display_name: str) -> str:
    return f"{PLAYER_PREFIX}{display_name}"


def player_stats_key(display_name: str) -> str:
    return f"{PLAYER_STATS_PREFIX}{display_name}"


def is_leaderboard_key(key: str) -> bool:
    """True for any key written by the roster, player or stats resolvers."""
    return key == ROSTER_KEY or key.startswith((PLAYER_PREFIX, PLAYER_STATS_PREFIX))
