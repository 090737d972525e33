"""Client for the roster, player search and player stats APIs."""
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from config import settings
from core.logging.logger import get_logger
from .errors import APIError, NetworkError, ParseError, RateLimitedError

logger = get_logger(__name__, service="api")


def _parse_retry_after(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class TrackerAPIClient:
    """
    Asynchronous client for the three read-only upstream APIs.

    Every request is issued exactly once: HTTP 429 raises RateLimitedError,
    other failures raise the matching APIError subclass. Pacing is the
    caller's job.
    """

    def __init__(
        self,
        roster_url: Optional[str] = None,
        search_url: Optional[str] = None,
        stats_url: Optional[str] = None,
        stats_mode: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.roster_url = (roster_url or settings.ROSTER_API_URL).rstrip("/")
        self.search_url = (search_url or settings.SEARCH_API_URL).rstrip("/")
        self.stats_url  = stats_url or settings.STATS_API_URL
        self.stats_mode = settings.STATS_MODE if stats_mode is None else stats_mode
        self.timeout    = timeout or settings.REQUEST_TIMEOUT
        self.session: Optional[httpx.AsyncClient] = None
        self.last_status_code: Optional[int] = None
        self._transport = transport

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": settings.USER_AGENT, "Accept": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _make_request(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        if self.session is None:
            raise RuntimeError("TrackerAPIClient must be used inside 'async with'")

        try:
            response = await self.session.get(url, params=params)
        except httpx.HTTPError as exc:
            raise NetworkError(url, message=str(exc) or type(exc).__name__) from exc

        self.last_status_code = response.status_code

        if response.status_code == 429:
            retry_after = _parse_retry_after(response.headers.get("Retry-After"))
            logger.warning(lambda: f"429 rate-limited {url}", extra={"retry_after": retry_after})
            raise RateLimitedError(url, retry_after)

        if not response.is_success:
            raise APIError(url, response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(url, response.status_code, "response is not valid JSON") from exc

    # ── Roster API ─────────────────────────────────────────────────────

    async def get_team(self, team_id: str) -> Dict[str, Any]:
        return await self._make_request(f"{self.roster_url}/{quote(team_id, safe='')}")

    # ── Search API ─────────────────────────────────────────────────────

    async def search_players(self, display_name: str) -> Dict[str, Any]:
        return await self._make_request(f"{self.search_url}/{quote(display_name, safe='')}")

    # ── Stats API ──────────────────────────────────────────────────────

    async def get_player_stats(self, player_id: str) -> Dict[str, Any]:
        params = {"playerID": player_id}
        if self.stats_mode:
            params["mode"] = self.stats_mode
        return await self._make_request(self.stats_url, params)
