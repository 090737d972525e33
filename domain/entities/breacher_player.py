"""Breacher player entity returned by the player search API."""
from dataclasses import dataclass


@dataclass(frozen=True)
class BreacherPlayer:
    """A search candidate narrowed down to one organization."""

    external_id: str
    display_name: str
    organization_tag: str

    @classmethod
    def from_api(cls, data: dict) -> 'BreacherPlayer':
        """Build from a search API ``users`` entry."""
        return cls(
            external_id=str(data['id']),
            display_name=str(data['playerName']),
            organization_tag=str(data.get('clan_tag') or ''),
        )

    def to_dict(self) -> dict:
        """Convert to the wire shape; also the cached representation."""
        return {
            'id': self.external_id,
            'playerName': self.display_name,
            'clan_tag': self.organization_tag,
        }
