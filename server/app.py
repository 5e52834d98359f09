"""FastAPI application factory."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from discord_client import DiscordWebhook
from row_report import get_style
from user_store import UserStore

from server import routes
from server.config import Settings, load_settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[UserStore] = None,
    discord: Optional[DiscordWebhook] = None,
) -> FastAPI:
    """Build the service.

    Collaborators default to ones built from the environment; tests pass
    their own.
    """
    settings = (settings or load_settings()).validate()
    # fail at startup rather than on the first webhook
    get_style(settings.report_style)

    app = FastAPI(title="Rowbot", version="1.0.0", docs_url=None, redoc_url=None)
    app.state.settings = settings
    app.state.store = store or UserStore(settings.db_path)
    app.state.discord = discord or DiscordWebhook(settings.discord_webhook_url)
    app.include_router(routes.router)

    logger.info(
        "Service configured for %s (style %s)",
        settings.external_url,
        settings.report_style,
    )
    return app
