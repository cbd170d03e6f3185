"""Application service (use case) for the profile screen."""

import asyncio
import logging
from dataclasses import dataclass, field

from aura_client.application.interfaces import AuthApi, CinemaApi, FoodApi, LanguagesApi
from aura_client.application.services.preferences_service import PreferencesService
from aura_client.application.services.result import capture
from aura_client.domain.entities import (
    DEFAULT_CALORIE_GOAL,
    LearningStreak,
    Meal,
    Movie,
    User,
    WatchStatus,
)

logger = logging.getLogger(__name__)

# Targets of the progress tiles.
WATCHED_TARGET = 20
WORDS_TARGET = 100
MEALS_TARGET = 3


def _ratio(value: int, target: int) -> float:
    return min(value / target, 1.0)


@dataclass
class ProfileState:
    user: User | None = None
    streak: LearningStreak | None = None
    my_movies: list[Movie] = field(default_factory=list)
    meals: list[Meal] = field(default_factory=list)


class ProfileService:
    """Account card and all-time progress, gathered from four endpoints."""

    def __init__(
        self,
        auth_api: AuthApi,
        cinema_api: CinemaApi,
        languages_api: LanguagesApi,
        food_api: FoodApi,
        preferences: PreferencesService | None = None,
        default_calorie_goal: int = DEFAULT_CALORIE_GOAL,
    ):
        self._auth_api = auth_api
        self._cinema_api = cinema_api
        self._languages_api = languages_api
        self._food_api = food_api
        self._preferences = preferences
        self._default_goal = default_calorie_goal
        self.state = ProfileState()

    async def load(self) -> ProfileState:
        user, streak, movies, meals = await asyncio.gather(
            capture(self._auth_api.get_me(), operation="Load profile"),
            capture(self._languages_api.get_learning_streak(), operation="Load streak"),
            capture(self._cinema_api.get_my_movies(), operation="Load my list"),
            capture(self._food_api.get_meal_history(), operation="Load meal history"),
        )
        self.state = ProfileState(
            user=user.value,
            streak=streak.value,
            my_movies=movies.value_or([]),
            meals=meals.value_or([]),
        )
        return self.state

    @property
    def display_name(self) -> str | None:
        if self.state.user is not None:
            return self.state.user.display_name
        if self._preferences is not None:
            return self._preferences.display_name
        return None

    @property
    def watched_count(self) -> int:
        return sum(
            1 for m in self.state.my_movies if m.watch_status is WatchStatus.WATCHED
        )

    @property
    def words_learned(self) -> int:
        if self.state.streak is None:
            return 0
        return self.state.streak.learned_words or 0

    @property
    def streak_days(self) -> int:
        return self.state.streak.streak_days if self.state.streak is not None else 0

    @property
    def meals_logged(self) -> int:
        return len(self.state.meals)

    @property
    def calorie_goal(self) -> int:
        if self._preferences is not None:
            override = self._preferences.calorie_goal_override
            if override is not None:
                return override
        if self.state.user is not None and self.state.user.calorie_goal:
            return self.state.user.calorie_goal
        return self._default_goal

    @property
    def watched_progress(self) -> float:
        return _ratio(self.watched_count, WATCHED_TARGET)

    @property
    def words_progress(self) -> float:
        return _ratio(self.words_learned, WORDS_TARGET)

    @property
    def meals_progress(self) -> float:
        return _ratio(self.meals_logged, MEALS_TARGET)
