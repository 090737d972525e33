"""Upstream API error hierarchy."""
from typing import Optional


class APIError(Exception):
    """Base exception for upstream API failures."""

    def __init__(self, url: str, status_code: Optional[int] = None, message: str = ""):
        self.url = url
        self.status_code = status_code

        full_message = url
        if status_code:
            full_message += f" (HTTP {status_code})"
        if message:
            full_message += f": {message}"
        super().__init__(full_message)


class RateLimitedError(APIError):
    """Raised when the upstream answers HTTP 429."""

    def __init__(self, url: str, retry_after: Optional[float] = None):
        super().__init__(url, status_code=429, message="rate limited")
        self.retry_after = retry_after


class NetworkError(APIError):
    """Raised when no HTTP response was received (DNS, connect, timeout)."""


class ParseError(APIError):
    """Raised when a response body is not the expected JSON shape."""
