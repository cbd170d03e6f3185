"""Unit tests for the ProfileService."""

import pytest

from aura_client.application.interfaces import AuthApi, CinemaApi, FoodApi, LanguagesApi
from aura_client.application.services import PreferencesService, ProfileService
from aura_client.domain.entities import (
    AuthToken,
    LearningStreak,
    Meal,
    Movie,
    User,
    WatchStatus,
)
from aura_client.domain.exceptions import NetworkError, UnauthorizedError
from aura_client.infrastructure.storage.json_file_store import InMemoryKeyValueStore


# ── Fakes ──
# Only the calls the profile screen makes are implemented.


class FakeAuthApi(AuthApi):
    def __init__(self, user: User | None):
        self.user = user

    async def login(self, email, password) -> AuthToken:
        raise NotImplementedError

    async def register(self, email, password, full_name) -> AuthToken:
        raise NotImplementedError

    async def get_me(self) -> User:
        if self.user is None:
            raise UnauthorizedError()
        return self.user


class FakeCinemaApi(CinemaApi):
    def __init__(self, movies: list[Movie]):
        self.movies = movies

    async def get_my_movies(self) -> list[Movie]:
        return self.movies

    async def get_trending(self):
        raise NotImplementedError

    async def search_movies(self, query):
        raise NotImplementedError

    async def mark_watched(self, tmdb_id, review=None):
        raise NotImplementedError

    async def add_to_watchlist(self, tmdb_id):
        raise NotImplementedError

    async def get_movie_details(self, tmdb_id):
        raise NotImplementedError

    async def get_movie_words(self, tmdb_id):
        raise NotImplementedError

    async def get_film_critique(self, tmdb_id):
        raise NotImplementedError


class FakeLanguagesApi(LanguagesApi):
    def __init__(self, streak: LearningStreak | None):
        self.streak = streak

    async def get_learning_streak(self) -> LearningStreak:
        if self.streak is None:
            raise NetworkError()
        return self.streak

    async def get_vocabulary(self):
        raise NotImplementedError

    async def mark_word_learned(self, word_id):
        raise NotImplementedError

    async def roleplay(self, scenario, message, history=None):
        raise NotImplementedError


class FakeFoodApi(FoodApi):
    def __init__(self, meals: list[Meal]):
        self.meals = meals

    async def get_meal_history(self) -> list[Meal]:
        return self.meals

    async def get_today_summary(self):
        raise NotImplementedError

    async def analyze_food_photo(self, image, meal_type=None):
        raise NotImplementedError

    async def add_manual_meal(self, meal):
        raise NotImplementedError

    async def delete_meal(self, meal_id):
        raise NotImplementedError

    async def get_dinner_ideas(self):
        raise NotImplementedError

    async def scan_product(self, image):
        raise NotImplementedError


def _service(
    user: User | None = None,
    streak: LearningStreak | None = None,
    movies: list[Movie] | None = None,
    meals: list[Meal] | None = None,
    preferences: PreferencesService | None = None,
) -> ProfileService:
    return ProfileService(
        auth_api=FakeAuthApi(user),
        cinema_api=FakeCinemaApi(movies or []),
        languages_api=FakeLanguagesApi(streak),
        food_api=FakeFoodApi(meals or []),
        preferences=preferences,
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_profile_stats():
    movies = [
        Movie(title=f"M{i}", tmdb_id=i, watch_status=WatchStatus.WATCHED) for i in range(25)
    ] + [Movie(title="Later", tmdb_id=99, watch_status=WatchStatus.IN_WATCHLIST)]
    service = _service(
        user=User(id=1, email="ana@example.com", full_name="Ana", calorie_goal=1900),
        streak=LearningStreak(streak_days=6, learned_words=40),
        movies=movies,
        meals=[Meal(id=1, name="Oats"), Meal(id=2, name="Soup")],
    )

    await service.load()

    assert service.display_name == "Ana"
    assert service.watched_count == 25
    assert service.watched_progress == 1.0
    assert service.words_learned == 40
    assert service.words_progress == pytest.approx(0.4)
    assert service.streak_days == 6
    assert service.meals_logged == 2
    assert service.meals_progress == pytest.approx(2 / 3)
    assert service.calorie_goal == 1900


@pytest.mark.asyncio
async def test_profile_degrades_when_calls_fail():
    preferences = PreferencesService(InMemoryKeyValueStore())
    preferences.complete_onboarding("Local Name")
    service = _service(preferences=preferences)

    state = await service.load()

    assert state.user is None
    assert state.streak is None
    assert service.words_learned == 0
    assert service.display_name == "Local Name"
    assert service.calorie_goal == 2200


@pytest.mark.asyncio
async def test_calorie_goal_override_wins():
    preferences = PreferencesService(InMemoryKeyValueStore())
    preferences.set_calorie_goal_override(1500)
    service = _service(
        user=User(id=1, email="a@b.c", calorie_goal=1900), preferences=preferences
    )

    await service.load()

    assert service.calorie_goal == 1500
