"""Shared fixtures: a controllable clock and a fake upstream."""
from __future__ import annotations

import time
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from infrastructure.api import TrackerAPIClient
from infrastructure.cache import ExpiringCache, MemoryStore

ROSTER_URL = "https://roster.test/Teams"
SEARCH_URL = "https://tracker.test/api/players/search"
STATS_URL = "https://tracker.test/api/players/stats"

SEARCH_PREFIX = "/api/players/search/"


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: int) -> None:
        self.now += ms / 1000.0


def stats_payload(rank: Optional[str], kills: Dict[str, int], deaths: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "statistics": {
            "Deaths": deaths,
            "Weapons": {name: {"Kills": k, "Shots": k * 10} for name, k in kills.items()},
        }
    }
    if rank is not None:
        payload["rank"] = rank
    return payload


def chbr(player_id: str, name: str) -> Dict[str, str]:
    return {"id": player_id, "playerName": name, "clan_tag": "CHBR"}


class UpstreamStub:
    """Routes requests by path, so it also answers the default endpoint hosts."""

    def __init__(self) -> None:
        self.roster: List[Optional[str]] = []
        self.roster_status = 200
        self.users: Dict[str, List[Dict[str, Any]]] = {}
        self.search_status: Dict[str, int] = {}
        self.stats: Dict[str, Dict[str, Any]] = {}
        self.stats_status: Dict[str, int] = {}
        self.requests: List[Tuple[str, str, float]] = []

    def add_member(self, name: str, player_id: str, rank: str = "Gold", kills: int = 10, deaths: int = 5) -> None:
        self.roster.append(name)
        self.users[name] = [chbr(player_id, name)]
        self.stats[player_id] = stats_payload(rank, {"rifle": kills}, deaths)

    def count(self, kind: str) -> int:
        return sum(1 for k, _, _ in self.requests if k == kind)

    def stats_times(self) -> Dict[str, float]:
        return {key: t for kind, key, t in self.requests if kind == "stats"}

    def handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        now = time.monotonic()
        if path.startswith("/Teams/"):
            self.requests.append(("roster", path.rsplit("/", 1)[-1], now))
            if self.roster_status != 200:
                return httpx.Response(self.roster_status)
            return httpx.Response(200, json={"team": {"players": [{"playerName": n} for n in self.roster]}})
        if path.startswith(SEARCH_PREFIX):
            name = path[len(SEARCH_PREFIX):]
            self.requests.append(("search", name, now))
            status = self.search_status.get(name, 200)
            if status != 200:
                return httpx.Response(status)
            return httpx.Response(200, json={"users": self.users.get(name, [])})
        if path == "/api/players/stats":
            player_id = request.url.params["playerID"]
            self.requests.append(("stats", player_id, now))
            status = self.stats_status.get(player_id, 200)
            if status != 200:
                return httpx.Response(status, headers={"Retry-After": "30"} if status == 429 else None)
            return httpx.Response(200, json=self.stats[player_id])
        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def cache(store: MemoryStore, clock: FakeClock) -> ExpiringCache:
    return ExpiringCache(store, clock=clock)


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()


@pytest_asyncio.fixture
async def api(upstream: UpstreamStub):
    client = TrackerAPIClient(
        roster_url=ROSTER_URL,
        search_url=SEARCH_URL,
        stats_url=STATS_URL,
        stats_mode="competitive",
        timeout=5,
        transport=upstream.transport,
    )
    async with client:
        yield client
