"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """
    Environment-driven settings for the leaderboard.

    All upstream APIs are public and read-only, so nothing here is secret.
    The stats API rate-limits aggressively; PACING_INTERVAL_MS is the gap
    inserted between consecutive stats requests of one leaderboard build.
    """

    # ── Upstream endpoints ─────────────────────────────────────────────────
    ROSTER_API_URL: str = os.getenv('ROSTER_API_URL', 'https://api.vrmasterleague.com/Teams')
    SEARCH_API_URL: str = os.getenv('SEARCH_API_URL', 'https://breacherstracker.com/api/players/search')
    STATS_API_URL:  str = os.getenv('STATS_API_URL',  'https://breacherstracker.com/api/players/stats')

    # Empty string disables the mode parameter on stats requests.
    STATS_MODE: str = os.getenv('STATS_MODE', 'competitive')

    # ── Team ───────────────────────────────────────────────────────────────
    TEAM_ID:          str = os.getenv('TEAM_ID',          'yajg_EC-gHj7I67wy7E5fA2')
    ORGANIZATION_TAG: str = os.getenv('ORGANIZATION_TAG', 'CHBR')

    # ── Cache ──────────────────────────────────────────────────────────────
    CACHE_TTL_MS:  int = int(os.getenv('CACHE_TTL_MS', str(60 * 60 * 1000)))
    CACHE_BACKEND: str = os.getenv('CACHE_BACKEND', 'sqlite').strip().lower()

    # ── Pacing ─────────────────────────────────────────────────────────────
    PACING_INTERVAL_MS: int = int(os.getenv('PACING_INTERVAL_MS', '500'))

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = float(os.getenv('REQUEST_TIMEOUT', '15'))
    USER_AGENT:      str   = os.getenv('USER_AGENT', 'cheeki-tracker/1.0')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR:  Path = Path(__file__).resolve().parent.parent
    DATA_DIR:  Path = BASE_DIR / 'data'
    CACHE_DIR: Path = DATA_DIR / 'cache'
    LOG_DIR:   Path = DATA_DIR / 'logs'

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def cache_db_path(cls) -> Path:
        return cls.CACHE_DIR / 'leaderboard.sqlite'

    @classmethod
    def validate(cls) -> None:
        if not cls.TEAM_ID:
            raise ValueError("TEAM_ID must be set in config/.env")
        if cls.CACHE_TTL_MS <= 0:
            raise ValueError("CACHE_TTL_MS must be positive")
        if cls.PACING_INTERVAL_MS < 0:
            raise ValueError("PACING_INTERVAL_MS cannot be negative")
        if cls.CACHE_BACKEND not in ('sqlite', 'memory'):
            raise ValueError(f"Unknown CACHE_BACKEND '{cls.CACHE_BACKEND}' (expected sqlite or memory)")

    @classmethod
    def create_directories(cls) -> None:
        cls.CACHE_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
