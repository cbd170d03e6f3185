"""Session store — the single bearer credential of this client."""

import logging

from aura_client.application.interfaces import KeyValueStore

logger = logging.getLogger(__name__)

TOKEN_KEY = "auth_token"


class SessionStore:
    """Holds at most one bearer token, persisted through a KeyValueStore.

    A non-empty token is the only signal the rest of the client uses to
    decide between "logged in" and "logged out".
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self) -> str | None:
        token = self._store.get_str(TOKEN_KEY)
        return token or None

    def set(self, token: str) -> None:
        if not token:
            self.clear()
            return
        self._store.set(TOKEN_KEY, token)
        logger.info("Session token stored")

    def clear(self) -> None:
        self._store.remove(TOKEN_KEY)
        logger.info("Session token cleared")

    @property
    def is_logged_in(self) -> bool:
        return self.get() is not None
