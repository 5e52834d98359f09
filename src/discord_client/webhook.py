"""Posts rendered reports to a Discord channel webhook.

Uses the multipart form of the execute-webhook endpoint: a
``payload_json`` part describing the message and a ``files[0]`` part
carrying the PNG.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Optional

import requests

from discord_client.exceptions import DiscordWebhookError

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "row-results.png"
_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2
_TIMEOUT_S = 15


def report_message(username: str) -> str:
    """Message text that accompanies a report image."""
    return f":person_rowing_boat: **{username}** completed a rowing activity!"


class DiscordWebhook:
    """A single channel webhook URL."""

    def __init__(self, url: str, session: Optional[requests.Session] = None) -> None:
        if not url:
            raise ValueError("Discord webhook URL is required")
        self._url = url
        self._session = session or requests.Session()

    def send_report(
        self,
        image: bytes,
        username: str,
        avatar_url: Optional[str] = None,
        filename: str = DEFAULT_FILENAME,
    ) -> None:
        """Post *image* with the standard completion message."""
        payload: dict = {
            "content": report_message(username),
            "attachments": [{"id": 0, "filename": filename}],
        }
        if avatar_url:
            payload["avatar_url"] = avatar_url

        self._post(payload, filename, image)
        logger.info("Sent report for %s to Discord (%d bytes)", username, len(image))

    def _post(self, payload: dict, filename: str, image: bytes) -> None:
        """POST with retry + exponential backoff on 429."""
        for attempt in range(_MAX_RETRIES):
            try:
                resp = self._session.post(
                    self._url,
                    data={"payload_json": json.dumps(payload)},
                    files={"files[0]": (filename, image, "image/png")},
                    timeout=_TIMEOUT_S,
                )
            except requests.RequestException as exc:
                raise DiscordWebhookError(f"Webhook request failed: {exc}") from exc

            if resp.status_code == 429:
                wait = _BASE_BACKOFF_S * (2 ** attempt)
                logger.warning(
                    "Discord rate limited (attempt %d/%d), retrying in %ds",
                    attempt + 1,
                    _MAX_RETRIES,
                    wait,
                )
                time.sleep(wait)
                continue
            if not resp.ok:
                raise DiscordWebhookError(
                    f"Webhook returned HTTP {resp.status_code}: {resp.text[:200]}",
                    status_code=resp.status_code,
                )
            return

        raise DiscordWebhookError(
            f"Rate limited after {_MAX_RETRIES} retries", status_code=429
        )
