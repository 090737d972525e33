"""Player statistics entity and kill/death ratio helpers."""
import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

Number = Union[int, float]


def total_kills(weapons: Optional[Mapping[str, Any]]) -> Number:
    """Sum ``Kills`` across every weapon entry."""
    total: Number = 0
    for weapon in (weapons or {}).values():
        total += (weapon or {}).get('Kills') or 0
    return total


def round_half_away_from_zero(value: float, places: int = 2) -> float:
    """Round ``value`` to ``places`` decimals, ties away from zero."""
    scale = 10 ** places
    scaled = value * scale
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / scale


def calculate_kd(statistics: Mapping[str, Any]) -> str:
    """
    Derive the displayed K/D from a stats payload.

    With no recorded deaths the ratio is the kill count itself, shown as a
    plain number; otherwise it is shown with two decimals.

    Args:
        statistics: the ``statistics`` object of a stats API response

    Returns:
        K/D rendered as a string
    """
    kills = total_kills(statistics.get('Weapons'))
    deaths = statistics.get('Deaths') or 0
    if deaths == 0:
        return _plain_number(kills)
    return f"{round_half_away_from_zero(kills / deaths):.2f}"


def _plain_number(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class PlayerStats:
    """Displayed statistics for one player; the leaderboard row."""

    rank: str
    display_name: str
    kd: str
    external_id: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert player stats to dictionary."""
        return {
            'rank': self.rank,
            'playerName': self.display_name,
            'kd': self.kd,
            'id': self.external_id,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'PlayerStats':
        return cls(
            rank=str(data.get('rank') or ''),
            display_name=str(data['playerName']),
            kd=str(data['kd']),
            external_id=data.get('id'),
        )
