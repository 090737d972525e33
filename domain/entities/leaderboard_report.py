"""Leaderboard build result."""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from ..enums import Outcome
from .player_stats import PlayerStats


@dataclass
class LeaderboardReport:
    """Rows in roster order plus the members that were dropped and why."""

    rows: List[PlayerStats] = field(default_factory=list)
    skipped: Dict[str, Outcome] = field(default_factory=dict)
    roster_size: int = 0

    def skipped_counts(self) -> Dict[Outcome, int]:
        return dict(Counter(self.skipped.values()))

    def to_dict(self) -> dict:
        return {
            'rows': [row.to_dict() for row in self.rows],
            'skipped': {name: outcome.value for name, outcome in self.skipped.items()},
            'roster_size': self.roster_size,
        }
