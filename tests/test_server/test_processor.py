"""Tests for webhook processing: token rotation, fetch, render, post."""

from __future__ import annotations

import io
from unittest.mock import patch

import pytest
from PIL import Image

from logbook_client import LogbookAuthError, LogbookDataError, TokenData
from server.processor import process_webhook
from user_store import UserNotFoundError

HOOK = {"type": "result-added", "result": {"id": 12345, "user_id": 1}}


@pytest.fixture
def registered(store):
    store.create_user(1, "rower42", "https://img/rower42.png", "old-a", "old-r")
    return store


@pytest.fixture
def mock_refresh():
    with patch(
        "server.processor.refresh_access_token",
        return_value=TokenData(access_token="new-a", refresh_token="new-r"),
    ) as m:
        yield m


@pytest.fixture
def mock_client_cls(splits_result):
    with patch("server.processor.LogbookClient") as cls:
        cls.return_value.get_result.return_value = splits_result
        yield cls


class TestProcessWebhook:
    def test_posts_rendered_report(
        self, settings, registered, discord, mock_refresh, mock_client_cls
    ):
        process_webhook(HOOK, settings, registered, discord)

        image, username, avatar = discord.send_report.call_args.args
        assert username == "rower42"
        assert avatar == "https://img/rower42.png"
        with Image.open(io.BytesIO(image)) as img:
            assert img.format == "PNG"
            assert img.width == 550

    def test_rotates_and_persists_tokens(
        self, settings, registered, discord, mock_refresh, mock_client_cls
    ):
        process_webhook(HOOK, settings, registered, discord)

        mock_refresh.assert_called_once_with(
            "https://log.example.com", "old-r", "cid", "secret"
        )
        user = registered.get_user_by_logbook_id(1)
        assert (user.access_token, user.refresh_token) == ("new-a", "new-r")
        mock_client_cls.assert_called_once_with("https://log.example.com", "new-a")
        mock_client_cls.return_value.get_result.assert_called_once_with(12345)

    def test_unknown_user(self, settings, store, discord, mock_refresh):
        with pytest.raises(UserNotFoundError):
            process_webhook(HOOK, settings, store, discord)
        mock_refresh.assert_not_called()
        discord.send_report.assert_not_called()

    def test_refresh_rejected(self, settings, registered, discord):
        with patch(
            "server.processor.refresh_access_token",
            side_effect=LogbookAuthError("revoked"),
        ):
            with pytest.raises(LogbookAuthError):
                process_webhook(HOOK, settings, registered, discord)
        assert registered.get_user_by_logbook_id(1).refresh_token == "old-r"
        discord.send_report.assert_not_called()

    @pytest.mark.parametrize(
        "data",
        [
            {"type": "result-added"},
            {"type": "result-added", "result": "12345"},
            {"type": "result-added", "result": {"id": 12345}},
            {"type": "result-added", "result": {"id": "abc", "user_id": 1}},
        ],
    )
    def test_malformed_delivery(self, settings, store, discord, data):
        with pytest.raises(LogbookDataError):
            process_webhook(data, settings, store, discord)
