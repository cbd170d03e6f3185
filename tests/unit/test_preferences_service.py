"""Unit tests for the PreferencesService."""

import pytest

from aura_client.application.services import PreferencesService
from aura_client.infrastructure.storage.json_file_store import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
)


@pytest.fixture
def preferences() -> PreferencesService:
    return PreferencesService(InMemoryKeyValueStore())


def test_learning_language_default_and_override(preferences: PreferencesService):
    assert preferences.learning_language == "German"

    preferences.set_learning_language("Spanish")
    assert preferences.learning_language == "Spanish"

    with pytest.raises(ValueError):
        preferences.set_learning_language(" ")


def test_platforms(preferences: PreferencesService):
    assert not preferences.has_any_platform

    preferences.connect_letterboxd(" @cinephile ")
    assert preferences.letterboxd_username == "cinephile"
    assert preferences.has_any_platform

    preferences.set_imdb_connected(True)
    preferences.disconnect_platforms()

    assert preferences.letterboxd_username is None
    assert not preferences.imdb_connected
    assert not preferences.has_any_platform


def test_kinopoisk_alone_counts_as_platform(preferences: PreferencesService):
    preferences.set_kinopoisk_connected(True)
    assert preferences.has_any_platform


def test_calorie_goal_override(preferences: PreferencesService):
    assert preferences.calorie_goal_override is None

    preferences.set_calorie_goal_override(1800)
    assert preferences.calorie_goal_override == 1800

    with pytest.raises(ValueError):
        preferences.set_calorie_goal_override(0)

    preferences.clear_calorie_goal_override()
    assert preferences.calorie_goal_override is None


def test_onboarding_persists(tmp_path):
    path = tmp_path / "state.json"
    PreferencesService(JsonFileKeyValueStore(path)).complete_onboarding(" Ana ", "French")

    reopened = PreferencesService(JsonFileKeyValueStore(path))
    assert reopened.onboarding_completed
    assert reopened.display_name == "Ana"
    assert reopened.learning_language == "French"
