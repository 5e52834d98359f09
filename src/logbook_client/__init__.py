"""Logbook API client: all logbook network I/O lives here."""

from logbook_client.auth import (
    TokenData,
    authorize_url,
    exchange_auth_code,
    refresh_access_token,
)
from logbook_client.client import LogbookClient, LogbookUser
from logbook_client.exceptions import (
    LogbookAPIError,
    LogbookAuthError,
    LogbookClientError,
    LogbookDataError,
    LogbookRateLimitError,
)
from logbook_client.result_mapper import map_result

__all__ = [
    "LogbookAPIError",
    "LogbookAuthError",
    "LogbookClient",
    "LogbookClientError",
    "LogbookDataError",
    "LogbookRateLimitError",
    "LogbookUser",
    "TokenData",
    "authorize_url",
    "exchange_auth_code",
    "map_result",
    "refresh_access_token",
]
