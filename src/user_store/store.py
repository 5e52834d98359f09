"""Single-table user credential store.

One connection per operation, so a store can be shared across the
service's worker threads.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing, contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

from user_store.exceptions import UserNotFoundError, UserStoreError

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY,
    logbook_id INTEGER NOT NULL UNIQUE,
    logbook_username TEXT NOT NULL UNIQUE,
    profile_image_url TEXT,
    access_token TEXT,
    refresh_token TEXT
);
"""

_UPSERT = """
INSERT INTO users (logbook_id, logbook_username, profile_image_url, access_token, refresh_token)
VALUES (?, ?, ?, ?, ?)
ON CONFLICT (logbook_id) DO UPDATE SET
    logbook_username = excluded.logbook_username,
    profile_image_url = excluded.profile_image_url,
    access_token = excluded.access_token,
    refresh_token = excluded.refresh_token;
"""


@dataclass(frozen=True)
class User:
    id: int
    logbook_id: int
    logbook_username: str
    profile_image_url: str
    access_token: str
    refresh_token: str


class UserStore:
    """Users keyed by their logbook account id."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = str(path)

    def init_schema(self) -> None:
        """Create the users table if it does not exist."""
        with self._connect() as conn:
            conn.executescript(_SCHEMA)
        logger.info("Initialized user store at %s", self._path)

    def create_user(
        self,
        logbook_id: int,
        logbook_username: str,
        profile_image_url: str,
        access_token: str,
        refresh_token: str,
    ) -> None:
        """Insert a user, or refresh the profile and tokens of an existing one."""
        logger.info("Creating user with id %d and username %s", logbook_id, logbook_username)
        with self._connect() as conn:
            conn.execute(
                _UPSERT,
                (logbook_id, logbook_username, profile_image_url, access_token, refresh_token),
            )

    def get_user_by_logbook_id(self, logbook_id: int) -> User:
        """Raises ``UserNotFoundError`` if the user never registered."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM users WHERE logbook_id = ?", (logbook_id,)
            ).fetchone()
        if row is None:
            raise UserNotFoundError(logbook_id)
        return User(
            id=row["id"],
            logbook_id=row["logbook_id"],
            logbook_username=row["logbook_username"],
            profile_image_url=row["profile_image_url"] or "",
            access_token=row["access_token"] or "",
            refresh_token=row["refresh_token"] or "",
        )

    def update_tokens(self, logbook_id: int, access_token: str, refresh_token: str) -> None:
        """Store a rotated token pair."""
        with self._connect() as conn:
            cur = conn.execute(
                "UPDATE users SET access_token = ?, refresh_token = ? WHERE logbook_id = ?",
                (access_token, refresh_token, logbook_id),
            )
            if cur.rowcount == 0:
                raise UserNotFoundError(logbook_id)

    # ------------------------------------------------------------------

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Connection that commits on success, rolls back on error, always closes."""
        try:
            conn = sqlite3.connect(self._path)
        except sqlite3.Error as exc:
            raise UserStoreError(f"Cannot open user store {self._path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        with closing(conn):
            try:
                yield conn
            except sqlite3.Error as exc:
                conn.rollback()
                raise UserStoreError(str(exc)) from exc
            except BaseException:
                conn.rollback()
                raise
            conn.commit()
