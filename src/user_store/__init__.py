"""SQLite-backed store of registered logbook users and their tokens."""

from user_store.exceptions import UserNotFoundError, UserStoreError
from user_store.store import User, UserStore

__all__ = ["User", "UserNotFoundError", "UserStore", "UserStoreError"]
