from __future__ import annotations

import json
import shutil
from typing import Optional

import httpx

from application.use_cases import RefreshLeaderboardUseCase
from config import settings
from core.logging.logger import get_logger
from domain.entities import LeaderboardReport
from domain.interfaces import IKeyValueStore
from infrastructure import ExpiringCache, TrackerAPIClient, create_store
from infrastructure.repositories.player_stats_repository import Sleep

_COLUMNS = (("Player", 24), ("Rank", 16), ("K/D", 8))


def format_table(report: LeaderboardReport) -> str:
    """Render the report as a fixed-width table in roster order."""
    width = min(shutil.get_terminal_size(fallback=(57, 20)).columns, 57)
    lines = [
        "=" * width,
        "CHEEKI TRACKER LEADERBOARD",
        "=" * width,
        "".join(title.ljust(size) for title, size in _COLUMNS).rstrip(),
        "-" * width,
    ]
    if not report.rows:
        lines.append("No players to show.")
    for row in report.rows:
        cells = (row.display_name, row.rank or "-", row.kd)
        lines.append("".join(str(c).ljust(size) for c, (_, size) in zip(cells, _COLUMNS)).rstrip())
    lines.append("-" * width)

    summary = f"{len(report.rows)} of {report.roster_size} roster members shown"
    counts = report.skipped_counts()
    if counts:
        detail = ", ".join(f"{n} {outcome.label}" for outcome, n in counts.items())
        summary += f" ({detail})"
    lines.append(summary)
    return "\n".join(lines)


def format_json(report: LeaderboardReport) -> str:
    return json.dumps(report.to_dict(), indent=2)


class LeaderboardCommand:
    """Builds the leaderboard once and prints it."""

    def __init__(
        self,
        store: Optional[IKeyValueStore] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Optional[Sleep] = None,
    ) -> None:
        self._log = get_logger(__name__, service="leaderboard-cli")
        self._store = store
        self._transport = transport
        self._sleep = sleep

    def _open_store(self) -> IKeyValueStore:
        return create_store(settings.CACHE_BACKEND, settings.cache_db_path())

    async def build(self, *, refresh: bool = False) -> LeaderboardReport:
        store = self._store if self._store is not None else self._open_store()
        try:
            cache = ExpiringCache(store)
            async with TrackerAPIClient(transport=self._transport) as api:
                use_case = RefreshLeaderboardUseCase(api, cache, sleep=self._sleep)
                return await use_case.execute(force=refresh)
        finally:
            if self._store is None:
                store.close()

    async def run(self, *, refresh: bool = False, json_out: bool = False) -> int:
        settings.validate()
        settings.create_directories()
        self._log.info(lambda: f"leaderboard-start refresh={refresh}")
        report = await self.build(refresh=refresh)
        print(format_json(report) if json_out else format_table(report))
        return 0 if report.rows else 1
