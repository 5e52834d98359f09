"""Tests for discord_client.webhook (mock-based, no real network calls)."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from discord_client import DiscordWebhook, DiscordWebhookError, report_message

PNG = b"\x89PNG\r\n\x1a\nfake"


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def webhook(session):
    return DiscordWebhook("https://discord.example.com/api/webhooks/1/abc", session=session)


class TestReportMessage:
    def test_mentions_username(self):
        assert report_message("rower42") == (
            ":person_rowing_boat: **rower42** completed a rowing activity!"
        )


class TestSendReport:
    def test_multipart_upload(self, webhook, session, make_response):
        session.post.return_value = make_response(204)
        webhook.send_report(PNG, "rower42", avatar_url="https://img/rower42.png")

        call = session.post.call_args
        assert call.args[0] == "https://discord.example.com/api/webhooks/1/abc"
        payload = json.loads(call.kwargs["data"]["payload_json"])
        assert payload["content"] == report_message("rower42")
        assert payload["avatar_url"] == "https://img/rower42.png"
        assert payload["attachments"] == [{"id": 0, "filename": "row-results.png"}]
        assert call.kwargs["files"] == {"files[0]": ("row-results.png", PNG, "image/png")}

    def test_no_avatar(self, webhook, session, make_response):
        session.post.return_value = make_response(200)
        webhook.send_report(PNG, "rower42")
        payload = json.loads(session.post.call_args.kwargs["data"]["payload_json"])
        assert "avatar_url" not in payload

    def test_http_error(self, webhook, session, make_response):
        session.post.return_value = make_response(400, text="Cannot send an empty message")
        with pytest.raises(DiscordWebhookError, match="HTTP 400") as excinfo:
            webhook.send_report(PNG, "rower42")
        assert excinfo.value.status_code == 400

    def test_network_error(self, webhook, session):
        session.post.side_effect = requests.ConnectionError("down")
        with pytest.raises(DiscordWebhookError, match="request failed"):
            webhook.send_report(PNG, "rower42")

    @patch("discord_client.webhook.time.sleep")
    def test_retries_rate_limit(self, mock_sleep, webhook, session, make_response):
        session.post.side_effect = [make_response(429), make_response(204)]
        webhook.send_report(PNG, "rower42")
        assert session.post.call_count == 2
        mock_sleep.assert_called_once_with(2)

    @patch("discord_client.webhook.time.sleep")
    def test_gives_up_on_rate_limit(self, mock_sleep, webhook, session, make_response):
        session.post.return_value = make_response(429)
        with pytest.raises(DiscordWebhookError) as excinfo:
            webhook.send_report(PNG, "rower42")
        assert excinfo.value.status_code == 429
        assert session.post.call_count == 3


class TestConstruction:
    def test_requires_url(self):
        with pytest.raises(ValueError):
            DiscordWebhook("")
