"""Custom exception hierarchy for the logbook API client."""

from __future__ import annotations


class LogbookClientError(Exception):
    """Base exception for all logbook_client errors."""


class LogbookAuthError(LogbookClientError):
    """OAuth token exchange failed (bad code, revoked refresh token, etc.)."""


class LogbookAPIError(LogbookClientError):
    """A logbook API call returned an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LogbookRateLimitError(LogbookAPIError):
    """HTTP 429, too many requests."""

    def __init__(self, message: str = "Rate limited by the logbook API") -> None:
        super().__init__(message, status_code=429)


class LogbookDataError(LogbookClientError):
    """A response could not be mapped to the report models."""
