"""Dependency wiring — builds infrastructure adapters and hands them to services."""

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
from aura_client.infrastructure.api import AuraApiClient, RequestExecutor
from aura_client.infrastructure.storage.json_file_store import JsonFileKeyValueStore


def get_key_value_store(settings: Settings | None = None) -> KeyValueStore:
    settings = settings or get_settings()
    return JsonFileKeyValueStore(settings.state_file)


def get_session_store(store: KeyValueStore) -> SessionStore:
    return SessionStore(store)


def get_preferences_service(
    store: KeyValueStore, settings: Settings | None = None
) -> PreferencesService:
    settings = settings or get_settings()
    return PreferencesService(store, settings.default_learning_language)


def get_api_client(
    session: SessionStore,
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> AuraApiClient:
    """Provides an AuraApiClient bound to the configured backend.

    Pass ``http_client`` to share one connection pool across calls (or to
    plug in a test transport); otherwise each call opens its own client.
    """
    settings = settings or get_settings()
    executor = RequestExecutor(
        base_url=settings.api_base_url,
        session=session,
        http_client=http_client,
        timeout=settings.request_timeout,
    )
    return AuraApiClient(executor)


def get_auth_service(api: AuraApiClient, session: SessionStore) -> AuthService:
    return AuthService(api, session)


def get_cinema_service(api: AuraApiClient, settings: Settings | None = None) -> CinemaService:
    settings = settings or get_settings()
    return CinemaService(api, rollback_failed_mutations=settings.rollback_failed_mutations)


def get_food_service(
    api: AuraApiClient,
    preferences: PreferencesService | None = None,
    settings: Settings | None = None,
) -> FoodService:
    settings = settings or get_settings()
    return FoodService(api, preferences, settings.default_calorie_goal)


def get_languages_service(
    api: AuraApiClient, settings: Settings | None = None
) -> LanguagesService:
    settings = settings or get_settings()
    return LanguagesService(api, rollback_failed_mutations=settings.rollback_failed_mutations)


def get_logistics_service(
    api: AuraApiClient, settings: Settings | None = None
) -> LogisticsService:
    settings = settings or get_settings()
    return LogisticsService(api, settings.default_traffic_destination)


def get_profile_service(
    api: AuraApiClient,
    preferences: PreferencesService | None = None,
    settings: Settings | None = None,
) -> ProfileService:
    settings = settings or get_settings()
    return ProfileService(
        auth_api=api,
        cinema_api=api,
        languages_api=api,
        food_api=api,
        preferences=preferences,
        default_calorie_goal=settings.default_calorie_goal,
    )


def get_movie_quiz(api: AuraApiClient) -> MovieQuiz:
    return MovieQuiz(api)
