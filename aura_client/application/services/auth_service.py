"""Application service (use case) for signing in and out."""

import logging

from aura_client.application.interfaces import AuthApi
from aura_client.application.services.session_store import SessionStore
from aura_client.domain.entities import AuthToken, User
from aura_client.domain.exceptions import AuraApiError

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Fill in all fields"
MISSING_NAME_MESSAGE = "Enter your name"


class AuthService:
    """Login, registration and logout. Depends on the AuthApi port (DI).

    Unlike the other screens, authentication surfaces every failure:
    AuraApiError propagates with a user-facing message. Missing form input
    raises ValueError before any request is made.
    """

    def __init__(self, api: AuthApi, session: SessionStore):
        self._api = api
        self._session = session

    @property
    def is_logged_in(self) -> bool:
        return self._session.is_logged_in

    async def login(self, email: str, password: str) -> AuthToken:
        email = email.strip()
        if not email or not password:
            raise ValueError(MISSING_FIELDS_MESSAGE)
        token = await self._api.login(email, password)
        self._session.set(token.access_token)
        logger.info("Logged in as %s", token.user.email)
        return token

    async def register(self, email: str, password: str, full_name: str) -> AuthToken:
        email = email.strip()
        if not email or not password:
            raise ValueError(MISSING_FIELDS_MESSAGE)
        if not full_name.strip():
            raise ValueError(MISSING_NAME_MESSAGE)
        token = await self._api.register(email, password, full_name.strip())
        self._session.set(token.access_token)
        logger.info("Registered %s", token.user.email)
        return token

    def logout(self) -> None:
        self._session.clear()

    async def current_user(self) -> User | None:
        """The signed-in account, or None when logged out or unreachable."""
        if not self._session.is_logged_in:
            return None
        try:
            return await self._api.get_me()
        except AuraApiError as exc:
            logger.warning("Could not load current user: %s", exc.message)
            return None
