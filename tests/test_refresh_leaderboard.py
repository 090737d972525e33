from __future__ import annotations

import pytest

from application.use_cases import RefreshLeaderboardUseCase
from infrastructure.api import TrackerAPIClient


async def _no_sleep(seconds: float) -> None:
    return None


@pytest.mark.asyncio
async def test_second_build_is_served_from_cache(api, cache, upstream) -> None:
    upstream.add_member("A", "pa")
    upstream.add_member("B", "pb")
    use_case = RefreshLeaderboardUseCase(api, cache, sleep=_no_sleep)

    first = await use_case.execute()
    calls = len(upstream.requests)
    second = await use_case.execute()

    assert first.rows == second.rows
    assert len(upstream.requests) == calls


@pytest.mark.asyncio
async def test_forced_refresh_refetches_everything(api, cache, upstream) -> None:
    upstream.add_member("A", "pa", kills=10, deaths=5)
    use_case = RefreshLeaderboardUseCase(api, cache, sleep=_no_sleep)
    await use_case.execute()

    upstream.add_member("B", "pb")
    upstream.stats["pa"]["statistics"]["Deaths"] = 10
    report = await use_case.execute(force=True)

    assert [(r.display_name, r.kd) for r in report.rows] == [("A", "1.00"), ("B", "2.00")]
    assert upstream.count("roster") == 2
    assert upstream.count("stats") == 3


def test_clear_cache_keeps_unrelated_entries(cache) -> None:
    cache.set("playerNames", ["A"], 60_000)
    cache.set("breacherPlayer_A", None, 60_000)
    cache.set("breacherPlayerData_A", {"kd": "1.00"}, 60_000)
    cache.set("settings", {"theme": "dark"}, 60_000)

    assert RefreshLeaderboardUseCase(TrackerAPIClient(), cache).clear_cache() == 3
    assert cache.keys() == ["settings"]
