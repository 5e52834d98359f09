"""Exceptions raised by the user store."""

from __future__ import annotations


class UserStoreError(Exception):
    """Base exception for all user_store errors."""


class UserNotFoundError(UserStoreError):
    """No user is registered for the given logbook id."""

    def __init__(self, logbook_id: int) -> None:
        super().__init__(f"user not found for logbook_id: {logbook_id}")
        self.logbook_id = logbook_id
