"""Discord webhook transport for workout reports."""

from discord_client.exceptions import DiscordWebhookError
from discord_client.webhook import DiscordWebhook, report_message

__all__ = ["DiscordWebhook", "DiscordWebhookError", "report_message"]
