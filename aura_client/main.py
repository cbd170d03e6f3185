"""Application factory — one wired-up client per process."""

import logging
from dataclasses import dataclass

import httpx

from aura_client.config import Settings, get_settings
from aura_client.application.interfaces import KeyValueStore
from aura_client.application.services import (
    AuthService,
    CinemaService,
    FoodService,
    LanguagesService,
    LogisticsService,
    MovieQuiz,
    PreferencesService,
    ProfileService,
    SessionStore,
)
from aura_client.infrastructure import dependencies
from aura_client.infrastructure.api import AuraApiClient
from aura_client.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class AuraApp:
    """Everything a front end needs: the API client and one service per screen."""

    settings: Settings
    session: SessionStore
    preferences: PreferencesService
    api: AuraApiClient
    auth: AuthService
    cinema: CinemaService
    food: FoodService
    languages: LanguagesService
    logistics: LogisticsService
    profile: ProfileService
    quiz: MovieQuiz


def create_app(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
    store: KeyValueStore | None = None,
) -> AuraApp:
    """Create and wire the Aura client.

    ``store`` defaults to the JSON state file named in settings; tests pass an
    in-memory store and an ``http_client`` with a mock or ASGI transport.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    store = store or dependencies.get_key_value_store(settings)
    session = dependencies.get_session_store(store)
    preferences = dependencies.get_preferences_service(store, settings)
    api = dependencies.get_api_client(session, settings, http_client)

    logger.info(
        "%s client ready (env=%s, backend=%s, logged_in=%s)",
        settings.app_name,
        settings.app_env,
        settings.api_base_url,
        session.is_logged_in,
    )
    return AuraApp(
        settings=settings,
        session=session,
        preferences=preferences,
        api=api,
        auth=dependencies.get_auth_service(api, session),
        cinema=dependencies.get_cinema_service(api, settings),
        food=dependencies.get_food_service(api, preferences, settings),
        languages=dependencies.get_languages_service(api, settings),
        logistics=dependencies.get_logistics_service(api, settings),
        profile=dependencies.get_profile_service(api, preferences, settings),
        quiz=dependencies.get_movie_quiz(api),
    )
