"""Turns a ``result-added`` webhook delivery into a posted report."""

from __future__ import annotations

import logging
import time
from typing import Any

from discord_client import DiscordWebhook
from logbook_client import LogbookClient, LogbookDataError, refresh_access_token
from row_report import render_workout_report
from user_store import UserStore

from server.config import Settings

logger = logging.getLogger(__name__)

RESULT_ADDED = "result-added"


def process_webhook(
    data: dict[str, Any],
    settings: Settings,
    store: UserStore,
    discord: DiscordWebhook,
) -> None:
    """Fetch the new result for its owner, render it and post it.

    1. Look up the registered user by logbook id.
    2. Rotate their tokens (the stored access token is usually stale).
    3. Fetch the full result and render the report.
    4. Send the image to the Discord channel.

    Errors propagate; the route decides how to answer the logbook.
    """
    started = time.monotonic()
    result = data.get("result")
    if not isinstance(result, dict):
        raise LogbookDataError("webhook delivery has no result object")
    try:
        result_id = int(result["id"])
        logbook_user_id = int(result["user_id"])
    except (KeyError, TypeError, ValueError) as exc:
        raise LogbookDataError(f"webhook result is missing ids: {result!r}") from exc

    user = store.get_user_by_logbook_id(logbook_user_id)

    tokens = refresh_access_token(
        settings.logbook_api_base_url,
        user.refresh_token,
        settings.logbook_client_id,
        settings.logbook_client_secret,
    )
    store.update_tokens(user.logbook_id, tokens.access_token, tokens.refresh_token)

    client = LogbookClient(settings.logbook_api_base_url, tokens.access_token)
    raw = client.get_result(result_id)

    image = render_workout_report(
        raw, style=settings.report_style, username=user.logbook_username
    )
    discord.send_report(image, user.logbook_username, user.profile_image_url)

    logger.info(
        "Processed result %d for %s in %.2fs",
        result_id,
        user.logbook_username,
        time.monotonic() - started,
    )
