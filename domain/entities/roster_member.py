"""Roster member entity."""
from dataclasses import dataclass


@dataclass(frozen=True)
class RosterMember:
    """A player listed on the team roster."""

    display_name: str

    @classmethod
    def from_api(cls, data: dict) -> 'RosterMember':
        """
        Build from a roster API ``players`` entry.

        Raises:
            ValueError: the entry carries no usable ``playerName``
        """
        name = data.get('playerName') if isinstance(data, dict) else None
        if name is None or not str(name).strip():
            raise ValueError(f"roster entry without playerName: {data!r}")
        return cls(display_name=str(name))
