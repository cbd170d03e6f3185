"""Application service for the small set of locally persisted preferences.

Values live in the same KeyValueStore as the session token, one flat key
per preference.
"""

import logging

from aura_client.application.interfaces import KeyValueStore

logger = logging.getLogger(__name__)

LEARNING_LANGUAGE_KEY = "learning_language"
LETTERBOXD_USERNAME_KEY = "letterboxd_username"
KINOPOISK_CONNECTED_KEY = "kinopoisk_connected"
IMDB_CONNECTED_KEY = "imdb_connected"
CALORIE_GOAL_OVERRIDE_KEY = "calorie_goal_override"
ONBOARDING_COMPLETED_KEY = "onboarding_completed"
DISPLAY_NAME_KEY = "user_display_name"

DEFAULT_LEARNING_LANGUAGE = "German"


class PreferencesService:
    """Typed accessors over the key-value store."""

    def __init__(
        self,
        store: KeyValueStore,
        default_learning_language: str = DEFAULT_LEARNING_LANGUAGE,
    ):
        self._store = store
        self._default_language = default_learning_language

    # ── Learning language ───────────────────────────────────────────

    @property
    def learning_language(self) -> str:
        return self._store.get_str(LEARNING_LANGUAGE_KEY) or self._default_language

    def set_learning_language(self, language: str) -> None:
        if not language.strip():
            raise ValueError("Learning language must not be empty")
        self._store.set(LEARNING_LANGUAGE_KEY, language.strip())

    # ── Connected platforms ─────────────────────────────────────────

    @property
    def letterboxd_username(self) -> str | None:
        return self._store.get_str(LETTERBOXD_USERNAME_KEY) or None

    def connect_letterboxd(self, username: str) -> None:
        username = username.strip().lstrip("@")
        if not username:
            raise ValueError("Letterboxd username must not be empty")
        self._store.set(LETTERBOXD_USERNAME_KEY, username)
        logger.info("Letterboxd connected as %s", username)

    def disconnect_letterboxd(self) -> None:
        self._store.remove(LETTERBOXD_USERNAME_KEY)

    @property
    def kinopoisk_connected(self) -> bool:
        return self._store.get_bool(KINOPOISK_CONNECTED_KEY)

    def set_kinopoisk_connected(self, connected: bool) -> None:
        self._store.set(KINOPOISK_CONNECTED_KEY, connected)

    @property
    def imdb_connected(self) -> bool:
        return self._store.get_bool(IMDB_CONNECTED_KEY)

    def set_imdb_connected(self, connected: bool) -> None:
        self._store.set(IMDB_CONNECTED_KEY, connected)

    @property
    def has_any_platform(self) -> bool:
        return (
            self.letterboxd_username is not None
            or self.kinopoisk_connected
            or self.imdb_connected
        )

    def disconnect_platforms(self) -> None:
        self.disconnect_letterboxd()
        self._store.remove(KINOPOISK_CONNECTED_KEY)
        self._store.remove(IMDB_CONNECTED_KEY)
        logger.info("All movie platforms disconnected")

    # ── Calorie goal ────────────────────────────────────────────────

    @property
    def calorie_goal_override(self) -> int | None:
        goal = self._store.get_int(CALORIE_GOAL_OVERRIDE_KEY)
        return goal if goal is not None and goal > 0 else None

    def set_calorie_goal_override(self, goal: int) -> None:
        if goal <= 0:
            raise ValueError("Calorie goal must be positive")
        self._store.set(CALORIE_GOAL_OVERRIDE_KEY, goal)

    def clear_calorie_goal_override(self) -> None:
        self._store.remove(CALORIE_GOAL_OVERRIDE_KEY)

    # ── Onboarding ──────────────────────────────────────────────────

    @property
    def onboarding_completed(self) -> bool:
        return self._store.get_bool(ONBOARDING_COMPLETED_KEY)

    @property
    def display_name(self) -> str | None:
        return self._store.get_str(DISPLAY_NAME_KEY) or None

    def complete_onboarding(
        self, display_name: str | None = None, learning_language: str | None = None
    ) -> None:
        if display_name and display_name.strip():
            self._store.set(DISPLAY_NAME_KEY, display_name.strip())
        if learning_language:
            self.set_learning_language(learning_language)
        self._store.set(ONBOARDING_COMPLETED_KEY, True)
        logger.info("Onboarding completed")
