"""High-level logbook API client facade.

All methods wrap raw HTTP calls with error handling and retry logic.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

import requests

from logbook_client.exceptions import (
    LogbookAPIError,
    LogbookDataError,
    LogbookRateLimitError,
)
from logbook_client.result_mapper import map_result
from row_report.models.result import RawResult

logger = logging.getLogger(__name__)

_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2
_TIMEOUT_S = 15


@dataclass(frozen=True)
class LogbookUser:
    """The authenticated logbook account."""

    id: int
    username: str
    profile_image_url: str = ""


class LogbookClient:
    """Facade for the logbook user and result endpoints."""

    def __init__(
        self,
        base_url: str,
        access_token: str,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
        }

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_current_user(self) -> LogbookUser:
        """Fetch the account the access token belongs to."""
        payload = self._get("/api/users/me")
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise LogbookDataError(f"Unexpected user response: {payload}")
        try:
            return LogbookUser(
                id=int(data["id"]),
                username=str(data["username"]),
                profile_image_url=data.get("profile_image") or "",
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise LogbookDataError(f"Unexpected user response: {payload}") from exc

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def get_result_payload(self, result_id: int) -> dict[str, Any]:
        """Fetch one workout result as raw JSON."""
        payload = self._get(f"/api/users/me/results/{int(result_id)}")
        if not isinstance(payload, dict):
            raise LogbookDataError(f"Unexpected result response: {payload!r}")
        return payload

    def get_result(self, result_id: int) -> RawResult:
        """Fetch one workout result, mapped to a RawResult."""
        result = map_result(self.get_result_payload(result_id), result_id=result_id)
        logger.info(
            "Fetched result id=%d (%dm, %d rows of breakdown)",
            result.id,
            result.distance,
            len(result.workout.splits or result.workout.intervals or ()),
        )
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get(self, path: str) -> Any:
        """GET *path* with retry + exponential backoff on 429."""
        url = f"{self._base_url}{path}"
        for attempt in range(_MAX_RETRIES):
            try:
                resp = self._session.get(url, headers=self._headers, timeout=_TIMEOUT_S)
            except requests.RequestException as exc:
                raise LogbookAPIError(f"GET {path} failed: {exc}") from exc

            if resp.status_code == 429:
                wait = _BASE_BACKOFF_S * (2 ** attempt)
                logger.warning(
                    "Rate limited (attempt %d/%d), retrying in %ds",
                    attempt + 1,
                    _MAX_RETRIES,
                    wait,
                )
                time.sleep(wait)
                continue
            if not resp.ok:
                raise LogbookAPIError(
                    f"GET {path} returned HTTP {resp.status_code}",
                    status_code=resp.status_code,
                )
            try:
                return resp.json()
            except ValueError as exc:
                raise LogbookDataError(f"GET {path} returned invalid JSON") from exc

        raise LogbookRateLimitError(f"Rate limited after {_MAX_RETRIES} retries: GET {path}")
