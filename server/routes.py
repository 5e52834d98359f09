"""Browser and webhook routes."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.templating import Jinja2Templates

from discord_client import DiscordWebhookError
from logbook_client import (
    LogbookClient,
    LogbookClientError,
    authorize_url,
    exchange_auth_code,
)
from row_report import ReportError
from user_store import UserStoreError

from server.config import Settings
from server.processor import RESULT_ADDED, process_webhook

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
COOKIE_MAX_AGE = 3600
TOKEN_COOKIES = ("access_token", "refresh_token")

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Anything the pipeline can raise once a delivery has been accepted.
_PROCESSING_ERRORS = (
    LogbookClientError,
    DiscordWebhookError,
    UserStoreError,
    ReportError,
    ValueError,
)


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def _set_token_cookie(response: Response, name: str, value: str, max_age: int) -> None:
    response.set_cookie(
        name,
        value,
        max_age=max_age,
        path="/",
        secure=True,
        httponly=True,
        samesite="strict",
    )


def _error_page(request: Request, message: str) -> HTMLResponse:
    return templates.TemplateResponse(request, "error.html", {"error_message": message})


@router.get("/", response_class=HTMLResponse)
def main_page(request: Request):
    settings = _settings(request)
    return templates.TemplateResponse(
        request,
        "main.html",
        {
            "logged_in": bool(request.cookies.get("access_token")),
            "login_url": authorize_url(
                settings.logbook_api_base_url,
                settings.logbook_client_id,
                settings.redirect_uri,
            ),
        },
    )


@router.get("/callback", response_class=HTMLResponse)
def oauth_callback(request: Request, code: str = "", error: str = ""):
    if error:
        return _error_page(request, error)
    if not code:
        return _error_page(request, "No authorization code received")

    settings = _settings(request)
    try:
        tokens = exchange_auth_code(
            settings.logbook_api_base_url,
            code,
            settings.logbook_client_id,
            settings.logbook_client_secret,
            settings.redirect_uri,
        )
        user = LogbookClient(settings.logbook_api_base_url, tokens.access_token).get_current_user()
        request.app.state.store.create_user(
            user.id,
            user.username,
            user.profile_image_url,
            tokens.access_token,
            tokens.refresh_token,
        )
    except (LogbookClientError, UserStoreError) as exc:
        logger.error("Token exchange failed: %s", exc)
        return _error_page(request, "Failed to exchange authorization code")

    response = templates.TemplateResponse(request, "success.html", {"username": user.username})
    _set_token_cookie(response, "access_token", tokens.access_token, COOKIE_MAX_AGE)
    _set_token_cookie(response, "refresh_token", tokens.refresh_token, COOKIE_MAX_AGE)
    return response


@router.post("/logout", response_class=PlainTextResponse)
def logout():
    response = PlainTextResponse("OK")
    for name in TOKEN_COOKIES:
        _set_token_cookie(response, name, "", 0)
    return response


@router.post("/webhook", response_class=PlainTextResponse)
async def logbook_webhook(request: Request):
    """Receive logbook result notifications.

    Anything other than an unreadable body is answered 200 so the logbook
    does not redeliver; failures after acceptance are only logged.
    """
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error("Unreadable webhook body: %s", exc)
        return PlainTextResponse("Error processing webhook", status_code=500)
    if not isinstance(data, dict):
        logger.error("Webhook body is not an object: %r", data)
        return PlainTextResponse("Error processing webhook", status_code=500)

    # result-updated and result-deleted are delivered too
    if data.get("type") != RESULT_ADDED:
        return PlainTextResponse("unsupported type")
    result = data.get("result")
    if not result:
        logger.warning("Webhook without result: %r", data)
        return PlainTextResponse("cannot parse result from hook data")

    logger.info(
        "Processing webhook with user_id:%s result_id:%s",
        result.get("user_id") if isinstance(result, dict) else None,
        result.get("id") if isinstance(result, dict) else None,
    )
    state = request.app.state
    try:
        await run_in_threadpool(
            process_webhook, data, state.settings, state.store, state.discord
        )
    except _PROCESSING_ERRORS as exc:
        logger.error("Error processing webhook: %s", exc)
    return PlainTextResponse("OK")


@router.get("/health", include_in_schema=False)
def health():
    return {"status": "ok"}
