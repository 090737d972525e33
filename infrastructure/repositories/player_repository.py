"""Player detail repository backed by the player search API."""
from typing import Any, Iterable, Optional

from config import settings
from core.logging.logger import get_logger
from domain.entities import BreacherPlayer, Resolution
from domain.enums import CacheStatus
from domain.interfaces import IPlayerRepository
from infrastructure.api import APIError, TrackerAPIClient
from infrastructure.cache import ExpiringCache, player_key

logger = get_logger(__name__, service="players")


class PlayerRepository(IPlayerRepository):
    """Resolves a display name to the organization's player record."""

    def __init__(
        self,
        api_client: TrackerAPIClient,
        cache: ExpiringCache,
        organization_tag: Optional[str] = None,
        ttl_ms: Optional[int] = None,
    ):
        self.api_client = api_client
        self.cache = cache
        self.organization_tag = organization_tag or settings.ORGANIZATION_TAG
        self.ttl_ms = settings.CACHE_TTL_MS if ttl_ms is None else ttl_ms

    def _pick(self, candidates: Iterable[Any]) -> Optional[BreacherPlayer]:
        for candidate in candidates:
            if isinstance(candidate, dict) and candidate.get("clan_tag") == self.organization_tag:
                return BreacherPlayer.from_api(candidate)
        return None

    def _from_cache(self, key: str) -> Optional[Resolution[BreacherPlayer]]:
        cached = self.cache.lookup(key)
        if cached.status is CacheStatus.HIT_NOT_FOUND:
            return Resolution.not_found()
        if cached.status is CacheStatus.HIT:
            try:
                return Resolution.of(BreacherPlayer.from_api(cached.value))
            except (KeyError, TypeError) as e:
                logger.warning(lambda: f"player-cache-invalid {key}: {e}")
                self.cache.clear(key)
        return None

    async def resolve(self, display_name: str) -> Resolution[BreacherPlayer]:
        """
        Look up ``display_name`` and keep the first candidate carrying the
        organization tag.

        Both a match and "no match" are cached; failures are not.
        """
        key = player_key(display_name)
        cached = self._from_cache(key)
        if cached is not None:
            return cached

        logger.info(lambda: f"player-search {display_name}")
        try:
            data = await self.api_client.search_players(display_name)
            player = self._pick(data["users"])
        except APIError as e:
            logger.error(lambda: f"player-search-failed {display_name}: {e}")
            return Resolution.failed(e)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(lambda: f"player-parse-failed {display_name}: {type(e).__name__}: {e}")
            return Resolution.failed(e)

        self.cache.set(key, player.to_dict() if player else None, self.ttl_ms)
        if player is None:
            logger.info(lambda: f"player-not-in-org {display_name} tag={self.organization_tag}")
            return Resolution.not_found()
        return Resolution.of(player)
