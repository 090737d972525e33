"""Roster repository backed by the roster API."""
from typing import List, Optional

from config import settings
from core.logging.logger import get_logger
from domain.entities import RosterMember
from domain.enums import CacheStatus
from domain.interfaces import IRosterRepository
from infrastructure.api import APIError, TrackerAPIClient
from infrastructure.cache import ROSTER_KEY, ExpiringCache

logger = get_logger(__name__, service="roster")


class RosterRepository(IRosterRepository):
    """Resolves the fixed team to its members' display names."""

    def __init__(
        self,
        api_client: TrackerAPIClient,
        cache: ExpiringCache,
        team_id: Optional[str] = None,
        ttl_ms: Optional[int] = None,
    ):
        """
        Initialize roster repository.

        Args:
            api_client: upstream API client, already entered
            cache: shared expiring cache
            team_id: roster API team identifier
            ttl_ms: lifetime of the cached roster
        """
        self.api_client = api_client
        self.cache = cache
        self.team_id = team_id or settings.TEAM_ID
        self.ttl_ms = settings.CACHE_TTL_MS if ttl_ms is None else ttl_ms

    async def resolve_roster(self) -> List[str]:
        """
        Get the current member display names.

        Returns:
            Names in roster order; empty when the roster could not be fetched
        """
        cached = self.cache.lookup(ROSTER_KEY)
        if cached.status is CacheStatus.HIT and isinstance(cached.value, list):
            logger.debug(lambda: f"roster-cache-hit size={len(cached.value)}")
            return [str(name) for name in cached.value]

        try:
            team = await self.api_client.get_team(self.team_id)
            players = team["team"]["players"]
            names = []
            for entry in players:
                try:
                    names.append(RosterMember.from_api(entry).display_name)
                except ValueError as e:
                    logger.warning(lambda: f"roster-entry-skipped {e}")
        except APIError as e:
            logger.error(lambda: f"roster-fetch-failed {e}")
            return []
        except (KeyError, TypeError, ValueError) as e:
            logger.error(lambda: f"roster-parse-failed {type(e).__name__}: {e}")
            return []

        self.cache.set(ROSTER_KEY, names, self.ttl_ms)
        logger.info(lambda: f"roster-fetched size={len(names)}")
        return names
