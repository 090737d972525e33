"""Typed outcome of one resolver step."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..enums import Outcome

T = TypeVar('T')


@dataclass(frozen=True)
class Resolution(Generic[T]):
    """Value plus the reason it is (or is not) there."""

    outcome: Outcome
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.outcome is Outcome.FOUND

    @classmethod
    def of(cls, value: T) -> 'Resolution[T]':
        return cls(Outcome.FOUND, value)

    @classmethod
    def not_found(cls) -> 'Resolution[T]':
        return cls(Outcome.NOT_FOUND)

    @classmethod
    def failed(cls, error: BaseException | str) -> 'Resolution[T]':
        return cls(Outcome.FAILED, error=str(error))

    @classmethod
    def rate_limited(cls, error: BaseException | str) -> 'Resolution[T]':
        return cls(Outcome.RATE_LIMITED, error=str(error))
