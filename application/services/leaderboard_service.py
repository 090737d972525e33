"""Leaderboard assembly across the roster, player and stats repositories."""
from __future__ import annotations

import asyncio
from typing import Any, List, Optional, Tuple

from config import settings
from core.logging.context import context
from core.logging.logger import get_logger, traceable
from domain.entities import BreacherPlayer, LeaderboardReport, PlayerStats, Resolution
from domain.interfaces import IPlayerRepository, IPlayerStatsRepository, IRosterRepository
from infrastructure.api import RateLimitedError
from infrastructure.cache import CacheError

logger = get_logger(__name__, service="leaderboard")


class LeaderboardService:
    """
    Builds the leaderboard for every roster member.

    Flow:
    ─────────────────────────────────────────────────────────────────
    1. roster            one cached request
    2. player details    every member at once, non-members dropped
    3. player stats      every remaining member at once, the i-th
                         request held back i × pacing interval
    4. rows              roster order, failed members dropped
    ─────────────────────────────────────────────────────────────────
    A member that fails at any step (rate limiting included) only
    removes its own row.
    """

    def __init__(
        self,
        roster_repo: IRosterRepository,
        player_repo: IPlayerRepository,
        stats_repo: IPlayerStatsRepository,
        pacing_interval_ms: Optional[int] = None,
    ):
        self.roster_repo = roster_repo
        self.player_repo = player_repo
        self.stats_repo = stats_repo
        self.pacing_interval_ms = settings.PACING_INTERVAL_MS if pacing_interval_ms is None else pacing_interval_ms

    async def build_leaderboard(self) -> List[PlayerStats]:
        """Rows for every member that resolved, in roster order."""
        report = await self.build_report()
        return report.rows

    @traceable
    async def build_report(self) -> LeaderboardReport:
        names = await self.roster_repo.resolve_roster()
        report = LeaderboardReport(roster_size=len(names))
        if not names:
            logger.warning("roster-empty")
            return report

        details = await asyncio.gather(
            *(self._resolve_member(name) for name in names), return_exceptions=True
        )

        pairs: List[Tuple[str, str]] = []
        for name, result in zip(names, details):
            resolution = self._settle(name, result)
            if resolution.found:
                pairs.append((name, resolution.value.external_id))
            else:
                report.skipped[name] = resolution.outcome

        stats = await asyncio.gather(
            *(self._fetch_member(i, name, external_id) for i, (name, external_id) in enumerate(pairs)),
            return_exceptions=True,
        )

        for (name, _), result in zip(pairs, stats):
            resolution = self._settle(name, result)
            if resolution.found:
                report.rows.append(resolution.value)
            else:
                report.skipped[name] = resolution.outcome

        logger.success(
            lambda: f"leaderboard-built rows={len(report.rows)} roster={report.roster_size}",
            extra={"skipped": {n: o.value for n, o in report.skipped.items()}},
        )
        return report

    @staticmethod
    def _settle(name: str, result: Any) -> Resolution[Any]:
        """Map one member's gathered result; anything unexpected is re-raised."""
        if isinstance(result, RateLimitedError):
            return Resolution.rate_limited(result)
        if isinstance(result, CacheError):
            logger.error(lambda: f"member-cache-failed {name}: {result}")
            return Resolution.failed(result)
        if isinstance(result, BaseException):
            raise result
        return result

    async def _resolve_member(self, name: str) -> Resolution[BreacherPlayer]:
        with context(player=name):
            return await self.player_repo.resolve(name)

    async def _fetch_member(self, index: int, name: str, external_id: str) -> Resolution[PlayerStats]:
        with context(player=name):
            return await self.stats_repo.fetch(external_id, name, delay_ms=index * self.pacing_interval_ms)
