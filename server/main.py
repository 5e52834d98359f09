"""Rowbot webhook service.

Usage:
    python -m server.main                  # serve on HOST:PORT from the env
    python -m server.main --init-db        # create the users table and exit
    python -m server.main --port 8080
"""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from server.app import create_app
from server.config import ConfigError, load_settings
from user_store import UserStore, UserStoreError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Rowbot logbook webhook service")
    parser.add_argument("--host", help="Bind address (default: $HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Bind port (default: $PORT or 3000)")
    parser.add_argument(
        "--init-db", action="store_true", help="Create the user store schema and exit"
    )
    args = parser.parse_args()

    settings = load_settings()

    if args.init_db:
        try:
            UserStore(settings.db_path).init_schema()
        except UserStoreError as exc:
            logger.error("Failed to initialize user store: %s", exc)
            sys.exit(1)
        return

    try:
        app = create_app(settings)
    except ConfigError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("Server running at http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    main()
