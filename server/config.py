"""Environment-variable-based configuration for the webhook service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_LOGBOOK_URL = "https://log-dev.concept2.com"


class ConfigError(RuntimeError):
    """A required configuration variable is missing."""


@dataclass(frozen=True)
class Settings:
    logbook_api_base_url: str
    logbook_client_id: str
    logbook_client_secret: str
    discord_webhook_url: str
    external_url: str
    db_path: Path
    report_style: str = "forest"
    host: str = "0.0.0.0"
    port: int = 3000

    @property
    def redirect_uri(self) -> str:
        """OAuth redirect registered with the logbook."""
        return f"{self.external_url.rstrip('/')}/callback"

    def validate(self) -> "Settings":
        """Raise ConfigError naming the first missing required variable."""
        required = (
            ("CONCEPT2_API_BASE_URL", self.logbook_api_base_url),
            ("DISCORD_WEBHOOK_URL", self.discord_webhook_url),
            ("APP_EXTERNAL_URL", self.external_url),
            ("CONCEPT2_CLIENT_ID", self.logbook_client_id),
            ("CONCEPT2_CLIENT_SECRET", self.logbook_client_secret),
        )
        for name, value in required:
            if not value:
                raise ConfigError(f"missing required configuration: {name}")
        return self


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from *environ* (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    return Settings(
        logbook_api_base_url=env.get("CONCEPT2_API_BASE_URL", DEFAULT_LOGBOOK_URL),
        logbook_client_id=env.get("CONCEPT2_CLIENT_ID", ""),
        logbook_client_secret=env.get("CONCEPT2_CLIENT_SECRET", ""),
        discord_webhook_url=env.get("DISCORD_WEBHOOK_URL", ""),
        external_url=env.get("APP_EXTERNAL_URL", ""),
        db_path=Path(env.get("ROWBOT_DB_PATH", "rowbot.db")).expanduser(),
        report_style=env.get("REPORT_STYLE", "forest"),
        host=env.get("HOST", "0.0.0.0"),
        port=int(env.get("PORT", "3000")),
    )
