"""Logbook OAuth helpers.

Both grants hit the same token endpoint; the logbook rotates the refresh
token on every exchange, so callers must persist the returned pair.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urlencode

import requests

from logbook_client.exceptions import LogbookAuthError

logger = logging.getLogger(__name__)

AUTHORIZE_PATH = "/oauth/authorize"
TOKEN_PATH = "/oauth/access_token"
DEFAULT_SCOPE = "user:read,results:read"
_TIMEOUT_S = 15


@dataclass(frozen=True)
class TokenData:
    """Token endpoint response."""

    access_token: str
    refresh_token: str
    expires_in: int = 0
    token_type: str = "Bearer"
    scope: str = ""


def authorize_url(base_url: str, client_id: str, redirect_uri: str) -> str:
    """URL that sends the user to the logbook consent screen."""
    query = urlencode(
        {
            "client_id": client_id,
            "scope": DEFAULT_SCOPE,
            "response_type": "code",
            "redirect_uri": redirect_uri,
        }
    )
    return f"{base_url.rstrip('/')}{AUTHORIZE_PATH}?{query}"


def exchange_auth_code(
    base_url: str,
    code: str,
    client_id: str,
    client_secret: str,
    redirect_uri: str,
    session: Optional[requests.Session] = None,
) -> TokenData:
    """Exchange an authorization code from the OAuth callback for tokens.

    Parameters
    ----------
    base_url : str
        Logbook API root, e.g. ``https://log.concept2.com``.
    code : str
        The ``code`` query parameter received on the redirect URI.
    client_id, client_secret : str
        Application credentials registered with the logbook.
    redirect_uri : str
        Must match the URI used when the user was sent to authorize.

    Returns
    -------
    TokenData
        Fresh access / refresh token pair.
    """
    return _request_token(
        base_url,
        {
            "grant_type": "authorization_code",
            "code": code,
            "client_id": client_id,
            "client_secret": client_secret,
            "redirect_uri": redirect_uri,
            "scope": DEFAULT_SCOPE,
        },
        session,
    )


def refresh_access_token(
    base_url: str,
    refresh_token: str,
    client_id: str,
    client_secret: str,
    session: Optional[requests.Session] = None,
) -> TokenData:
    """Trade a stored refresh token for a new token pair.

    Raises ``LogbookAuthError`` if the refresh token was rejected.
    """
    return _request_token(
        base_url,
        {
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
            "client_id": client_id,
            "client_secret": client_secret,
            "scope": DEFAULT_SCOPE,
        },
        session,
    )


def _request_token(
    base_url: str, form: dict[str, str], session: Optional[requests.Session]
) -> TokenData:
    http = session or requests
    grant = form["grant_type"]
    try:
        resp = http.post(f"{base_url.rstrip('/')}{TOKEN_PATH}", data=form, timeout=_TIMEOUT_S)
    except requests.RequestException as exc:
        raise LogbookAuthError(f"Token request failed: {exc}") from exc

    if not resp.ok:
        raise LogbookAuthError(
            f"Token exchange ({grant}) failed with HTTP {resp.status_code}: {resp.text[:200]}"
        )

    try:
        payload: dict[str, Any] = resp.json()
        token = TokenData(
            access_token=payload["access_token"],
            refresh_token=payload["refresh_token"],
            expires_in=int(payload.get("expires_in") or 0),
            token_type=payload.get("token_type") or "Bearer",
            scope=payload.get("scope") or "",
        )
    except (ValueError, KeyError, TypeError) as exc:
        raise LogbookAuthError(f"Malformed token response: {exc}") from exc

    logger.info("Obtained logbook tokens via %s grant", grant)
    return token
