"""Bearer credential and cached user profile kept in client storage."""

import json

import structlog

from cart.storage import TOKEN_KEY, USER_KEY, Storage

logger = structlog.get_logger(__name__)


class Session:
    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    @property
    def token(self) -> str | None:
        return self._storage.get(TOKEN_KEY) or None

    @property
    def user(self) -> dict | None:
        """The cached profile; a corrupted entry is discarded."""
        raw = self._storage.get(USER_KEY)
        if raw is None:
            return None
        try:
            user = json.loads(raw)
        except ValueError:
            logger.warning("cached_user_unreadable")
            self._storage.remove(USER_KEY)
            return None
        return user if isinstance(user, dict) else None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def login(self, token: str, user: dict | None = None) -> None:
        self._storage.set(TOKEN_KEY, token)
        if user is not None:
            self._storage.set(USER_KEY, json.dumps(user))

    def logout(self) -> None:
        self._storage.remove(TOKEN_KEY)
        self._storage.remove(USER_KEY)
