"""Fixtures for the webhook service: settings, a temp user store, mocked Discord."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from discord_client import DiscordWebhook
from server.app import create_app
from server.config import Settings
from user_store import UserStore


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        logbook_api_base_url="https://log.example.com",
        logbook_client_id="cid",
        logbook_client_secret="secret",
        discord_webhook_url="https://discord.example.com/api/webhooks/1/abc",
        external_url="https://bot.example.com",
        db_path=tmp_path / "rowbot.db",
    )


@pytest.fixture
def store(settings) -> UserStore:
    s = UserStore(settings.db_path)
    s.init_schema()
    return s


@pytest.fixture
def discord() -> MagicMock:
    return MagicMock(spec=DiscordWebhook)


@pytest.fixture
def client(settings, store, discord) -> TestClient:
    return TestClient(create_app(settings, store=store, discord=discord))
