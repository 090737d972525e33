"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import BreacherPlayer, PlayerStats, Resolution


class IRosterRepository(ABC):
    """Interface for the team roster."""

    @abstractmethod
    async def resolve_roster(self) -> List[str]:
        """Get member display names; empty when the roster is unavailable."""
        pass


class IPlayerRepository(ABC):
    """Interface for display name to player lookups."""

    @abstractmethod
    async def resolve(self, display_name: str) -> Resolution[BreacherPlayer]:
        """Look up a player, distinguishing not-found from failure."""
        pass

    async def resolve_details(self, display_name: str) -> Optional[BreacherPlayer]:
        """Get the organization's player for a display name, if any."""
        result = await self.resolve(display_name)
        return result.value if result.found else None


class IPlayerStatsRepository(ABC):
    """Interface for per-player statistics."""

    @abstractmethod
    async def fetch(
        self, external_id: str, display_name: str, delay_ms: int = 0
    ) -> Resolution[PlayerStats]:
        """Get stats for a player; rate limiting raises instead of resolving."""
        pass

    async def fetch_stats(
        self, external_id: str, display_name: str, delay_ms: int = 0
    ) -> Optional[PlayerStats]:
        """Get stats for a player, or None when they could not be fetched."""
        result = await self.fetch(external_id, display_name, delay_ms)
        return result.value if result.found else None
