from __future__ import annotations

import pytest

from domain.entities import BreacherPlayer
from domain.enums import CacheStatus, Outcome
from infrastructure.api import RateLimitedError
from infrastructure.cache import ROSTER_KEY, player_key, player_stats_key
from infrastructure.repositories import PlayerRepository, PlayerStatsRepository, RosterRepository
from conftest import chbr, stats_payload

TTL = 60 * 60 * 1000


# ── Roster ─────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_roster_is_fetched_once_and_cached(api, cache, upstream) -> None:
    upstream.roster = ["Alpha", "Bravo"]
    repo = RosterRepository(api, cache, team_id="team-1", ttl_ms=TTL)

    assert await repo.resolve_roster() == ["Alpha", "Bravo"]
    assert await repo.resolve_roster() == ["Alpha", "Bravo"]
    assert upstream.count("roster") == 1
    assert upstream.requests[0][1] == "team-1"
    assert cache.get(ROSTER_KEY) == ["Alpha", "Bravo"]


@pytest.mark.asyncio
async def test_roster_refetched_after_ttl(api, cache, clock, upstream) -> None:
    upstream.roster = ["Alpha"]
    repo = RosterRepository(api, cache, team_id="team-1", ttl_ms=TTL)

    await repo.resolve_roster()
    clock.advance_ms(TTL)
    upstream.roster = ["Alpha", "Charlie"]

    assert await repo.resolve_roster() == ["Alpha", "Charlie"]
    assert upstream.count("roster") == 2


@pytest.mark.asyncio
async def test_roster_skips_entries_without_a_name(api, cache, upstream) -> None:
    upstream.roster = ["Alpha", None, "  ", "Bravo"]
    repo = RosterRepository(api, cache, team_id="team-1")

    assert await repo.resolve_roster() == ["Alpha", "Bravo"]
    assert cache.get(ROSTER_KEY) == ["Alpha", "Bravo"]
    assert upstream.count("search") == 0


@pytest.mark.asyncio
async def test_zero_ttl_is_not_replaced_by_default(api, cache, upstream) -> None:
    upstream.roster = ["Alpha"]
    repo = RosterRepository(api, cache, team_id="team-1", ttl_ms=0)

    assert repo.ttl_ms == 0
    await repo.resolve_roster()
    await repo.resolve_roster()
    assert upstream.count("roster") == 2
    assert PlayerRepository(api, cache, ttl_ms=0).ttl_ms == 0
    assert PlayerStatsRepository(api, cache, ttl_ms=0).ttl_ms == 0


@pytest.mark.asyncio
async def test_roster_failure_degrades_to_empty(api, cache, upstream) -> None:
    upstream.roster_status = 500
    repo = RosterRepository(api, cache, team_id="team-1")

    assert await repo.resolve_roster() == []
    assert cache.lookup(ROSTER_KEY).status is CacheStatus.MISS


# ── Player details ─────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_first_org_candidate_wins(api, cache, upstream) -> None:
    upstream.users["Alpha"] = [
        {"id": "x1", "playerName": "Alpha", "clan_tag": "OTHR"},
        chbr("p1", "Alpha"),
        chbr("p2", "Alpha2"),
    ]
    repo = PlayerRepository(api, cache, organization_tag="CHBR")

    player = await repo.resolve_details("Alpha")

    assert player == BreacherPlayer(external_id="p1", display_name="Alpha", organization_tag="CHBR")
    assert cache.get(player_key("Alpha"))["id"] == "p1"


@pytest.mark.asyncio
async def test_repeated_lookup_issues_one_request(api, cache, upstream) -> None:
    upstream.users["Alpha"] = [chbr("p1", "Alpha")]
    repo = PlayerRepository(api, cache, organization_tag="CHBR")

    first = await repo.resolve("Alpha")
    second = await repo.resolve("Alpha")

    assert first == second
    assert first.outcome is Outcome.FOUND
    assert upstream.count("search") == 1


@pytest.mark.asyncio
async def test_not_found_is_cached_and_short_circuits(api, cache, upstream) -> None:
    upstream.users["Ghost"] = [{"id": "x1", "playerName": "Ghost", "clan_tag": "OTHR"}]
    repo = PlayerRepository(api, cache, organization_tag="CHBR")

    assert (await repo.resolve("Ghost")).outcome is Outcome.NOT_FOUND
    assert await repo.resolve_details("Ghost") is None
    assert upstream.count("search") == 1
    assert cache.lookup(player_key("Ghost")).status is CacheStatus.HIT_NOT_FOUND


@pytest.mark.asyncio
async def test_search_failure_is_not_cached(api, cache, upstream) -> None:
    upstream.search_status["Alpha"] = 502
    repo = PlayerRepository(api, cache, organization_tag="CHBR")

    result = await repo.resolve("Alpha")
    assert result.outcome is Outcome.FAILED
    assert "502" in result.error
    assert await repo.resolve_details("Alpha") is None
    assert upstream.count("search") == 2


@pytest.mark.asyncio
async def test_search_rate_limit_is_swallowed(api, cache, upstream) -> None:
    upstream.search_status["Alpha"] = 429
    repo = PlayerRepository(api, cache, organization_tag="CHBR")

    assert (await repo.resolve("Alpha")).outcome is Outcome.FAILED


@pytest.mark.asyncio
async def test_malformed_search_body_fails(api, cache, upstream) -> None:
    upstream.users["Alpha"] = None
    repo = PlayerRepository(api, cache, organization_tag="CHBR")

    assert (await repo.resolve("Alpha")).outcome is Outcome.FAILED


# ── Player stats ───────────────────────────────────────────────────────────

class RecordingSleep:
    def __init__(self) -> None:
        self.calls = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.mark.asyncio
async def test_stats_are_derived_and_cached(api, cache, upstream) -> None:
    upstream.stats["p1"] = stats_payload("Diamond", {"pistol": 10, "rifle": 15}, 5)
    repo = PlayerStatsRepository(api, cache, ttl_ms=TTL)

    stats = await repo.fetch_stats("p1", "Alpha")

    assert stats.kd == "5.00"
    assert stats.rank == "Diamond"
    assert stats.display_name == "Alpha"
    assert stats.external_id == "p1"
    assert cache.get(player_stats_key("Alpha"))["kd"] == "5.00"

    assert await repo.fetch_stats("p1", "Alpha") == stats
    assert upstream.count("stats") == 1


@pytest.mark.asyncio
async def test_missing_rank_yields_empty_rank(api, cache, upstream) -> None:
    upstream.stats["p1"] = stats_payload(None, {"rifle": 7}, 0)
    repo = PlayerStatsRepository(api, cache)

    stats = await repo.fetch_stats("p1", "Alpha")
    assert stats.rank == ""
    assert stats.kd == "7"


@pytest.mark.asyncio
async def test_rate_limit_propagates_and_is_not_cached(api, cache, upstream) -> None:
    upstream.stats_status["p1"] = 429
    repo = PlayerStatsRepository(api, cache)

    with pytest.raises(RateLimitedError):
        await repo.fetch_stats("p1", "Alpha")
    assert cache.lookup(player_stats_key("Alpha")).status is CacheStatus.MISS


@pytest.mark.asyncio
async def test_other_stats_failures_yield_none(api, cache, upstream) -> None:
    upstream.stats_status["p1"] = 500
    upstream.stats["p2"] = {"rank": "Gold"}
    repo = PlayerStatsRepository(api, cache)

    assert await repo.fetch_stats("p1", "Alpha") is None
    failed = await repo.fetch("p2", "Bravo")
    assert failed.outcome is Outcome.FAILED


@pytest.mark.asyncio
async def test_delay_applies_only_on_cache_miss(api, cache, upstream) -> None:
    upstream.stats["p1"] = stats_payload("Gold", {"rifle": 1}, 1)
    sleep = RecordingSleep()
    repo = PlayerStatsRepository(api, cache, sleep=sleep)

    await repo.fetch_stats("p1", "Alpha", delay_ms=1000)
    await repo.fetch_stats("p1", "Alpha", delay_ms=1000)
    await repo.fetch_stats("p1", "Other", delay_ms=0)

    assert sleep.calls == [1.0]
