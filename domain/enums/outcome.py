"""Resolver outcome enumeration."""
from enum import Enum


class Outcome(Enum):
    """Why a leaderboard member did or did not produce a row."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    RATE_LIMITED = "rate_limited"

    @property
    def label(self) -> str:
        """Human-friendly label for CLI output."""
        return self.value.replace("_", " ")
