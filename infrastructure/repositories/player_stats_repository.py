"""Player statistics repository backed by the stats API."""
import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional

from config import settings
from core.logging.logger import get_logger
from domain.entities import PlayerStats, Resolution, calculate_kd
from domain.enums import CacheStatus
from domain.interfaces import IPlayerStatsRepository
from infrastructure.api import APIError, RateLimitedError, TrackerAPIClient
from infrastructure.cache import ExpiringCache, player_stats_key

logger = get_logger(__name__, service="stats")

Sleep = Callable[[float], Awaitable[Any]]


class PlayerStatsRepository(IPlayerStatsRepository):
    """Fetches and derives display statistics, pacing requests on demand."""

    def __init__(
        self,
        api_client: TrackerAPIClient,
        cache: ExpiringCache,
        ttl_ms: Optional[int] = None,
        sleep: Optional[Sleep] = None,
    ):
        self.api_client = api_client
        self.cache = cache
        self.ttl_ms = settings.CACHE_TTL_MS if ttl_ms is None else ttl_ms
        self._sleep = sleep or asyncio.sleep

    def _from_cache(self, key: str) -> Optional[PlayerStats]:
        cached = self.cache.lookup(key)
        if cached.status is not CacheStatus.HIT:
            return None
        try:
            return PlayerStats.from_dict(cached.value)
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning(lambda: f"stats-cache-invalid {key}: {e}")
            self.cache.clear(key)
            return None

    @staticmethod
    def build_stats(data: Dict[str, Any], external_id: str, display_name: str) -> PlayerStats:
        """Turn a raw stats payload into the displayed row."""
        kd = calculate_kd(data["statistics"])
        rank = data.get("rank")
        if rank is None:
            logger.warning(lambda: f"stats-rank-missing {display_name}")
            rank = ""
        return PlayerStats(rank=str(rank), display_name=display_name, kd=kd, external_id=external_id)

    async def fetch(
        self, external_id: str, display_name: str, delay_ms: int = 0
    ) -> Resolution[PlayerStats]:
        """
        Get stats for one player.

        A cache hit returns immediately. On a miss the request waits
        ``delay_ms`` before it is sent.

        Raises:
            RateLimitedError: the stats API answered HTTP 429
        """
        key = player_stats_key(display_name)
        cached = self._from_cache(key)
        if cached is not None:
            logger.debug(lambda: f"stats-cache-hit {display_name}")
            return Resolution.of(cached)

        if delay_ms > 0:
            await self._sleep(delay_ms / 1000.0)

        try:
            data = await self.api_client.get_player_stats(external_id)
            stats = self.build_stats(data, external_id, display_name)
        except RateLimitedError:
            logger.warning(lambda: f"stats-rate-limited {display_name}")
            raise
        except APIError as e:
            logger.error(lambda: f"stats-fetch-failed {display_name}: {e}")
            return Resolution.failed(e)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(lambda: f"stats-parse-failed {display_name}: {type(e).__name__}: {e}")
            return Resolution.failed(e)

        self.cache.set(key, stats.to_dict(), self.ttl_ms)
        return Resolution.of(stats)
