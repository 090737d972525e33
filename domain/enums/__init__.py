"""Domain enumerations."""
from .outcome import Outcome
from .cache_status import CacheStatus

__all__ = [
    'Outcome',
    'CacheStatus',
]
