"""Exceptions raised by the Discord webhook transport."""

from __future__ import annotations


class DiscordWebhookError(Exception):
    """Delivering a message to the webhook failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
