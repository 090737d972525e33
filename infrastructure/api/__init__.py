"""Infrastructure API module."""
from .tracker_client import TrackerAPIClient
from .errors import APIError, NetworkError, ParseError, RateLimitedError

__all__ = [
    'TrackerAPIClient',
    'APIError',
    'NetworkError',
    'ParseError',
    'RateLimitedError',
]
