"""Use case for showing and refreshing the leaderboard."""
from __future__ import annotations

from typing import Optional

from application.services.leaderboard_service import LeaderboardService
from core.logging.logger import get_logger
from domain.entities import LeaderboardReport
from infrastructure import PlayerRepository, PlayerStatsRepository, RosterRepository, TrackerAPIClient
from infrastructure.cache import ExpiringCache, is_leaderboard_key
from infrastructure.repositories.player_stats_repository import Sleep

logger = get_logger(__name__, service="leaderboard")


class RefreshLeaderboardUseCase:
    """Wires the repositories onto one client and cache, and owns cache resets."""

    def __init__(
        self,
        api_client: TrackerAPIClient,
        cache: ExpiringCache,
        pacing_interval_ms: Optional[int] = None,
        sleep: Optional[Sleep] = None,
    ):
        self.cache = cache
        self.service = LeaderboardService(
            RosterRepository(api_client, cache),
            PlayerRepository(api_client, cache),
            PlayerStatsRepository(api_client, cache, sleep=sleep),
            pacing_interval_ms=pacing_interval_ms,
        )

    def clear_cache(self) -> int:
        """Drop every roster, player and stats entry; returns how many."""
        removed = self.cache.clear_matching(is_leaderboard_key)
        logger.info(lambda: f"cache-cleared entries={removed}")
        return removed

    async def execute(self, force: bool = False) -> LeaderboardReport:
        """Build the leaderboard; ``force`` discards cached lookups first."""
        if force:
            self.clear_cache()
        return await self.service.build_report()
