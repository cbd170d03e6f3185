"""Abstract Aura backend interfaces — ports for the API adapter.

One port per backend area, so each use-case service depends only on the
calls it makes. AuraApiClient implements all of them.

Every method raises AuraApiError subclasses on failure:
NetworkError, UnauthorizedError or ServerError.
"""

from abc import ABC, abstractmethod

from aura_client.application.schemas import ManualMealRequest
from aura_client.domain.entities import (
    AuthToken,
    DailySummary,
    DinnerIdeas,
    LearningStreak,
    Meal,
    MealType,
    Movie,
    MovieDetails,
    MovieWord,
    ParsedTask,
    Place,
    RoleplayReply,
    Route,
    ScannedProduct,
    TrafficAdvice,
    User,
    VocabWord,
)


class AuthApi(ABC):
    """Port — account endpoints."""

    @abstractmethod
    async def login(self, email: str, password: str) -> AuthToken:
        ...

    @abstractmethod
    async def register(self, email: str, password: str, full_name: str) -> AuthToken:
        ...

    @abstractmethod
    async def get_me(self) -> User:
        ...


class CinemaApi(ABC):
    """Port — movie tracking endpoints."""

    @abstractmethod
    async def get_trending(self) -> list[Movie]:
        ...

    @abstractmethod
    async def get_my_movies(self) -> list[Movie]:
        ...

    @abstractmethod
    async def search_movies(self, query: str) -> list[Movie]:
        ...

    @abstractmethod
    async def mark_watched(self, tmdb_id: int, review: str | None = None) -> Movie:
        ...

    @abstractmethod
    async def add_to_watchlist(self, tmdb_id: int) -> Movie:
        ...

    @abstractmethod
    async def get_movie_details(self, tmdb_id: int) -> MovieDetails:
        ...

    @abstractmethod
    async def get_movie_words(self, tmdb_id: int) -> list[MovieWord]:
        ...

    @abstractmethod
    async def get_film_critique(self, tmdb_id: int) -> str:
        ...


class FoodApi(ABC):
    """Port — food logging endpoints."""

    @abstractmethod
    async def get_today_summary(self) -> DailySummary:
        ...

    @abstractmethod
    async def get_meal_history(self) -> list[Meal]:
        ...

    @abstractmethod
    async def analyze_food_photo(
        self, image: bytes, meal_type: MealType = MealType.SNACK
    ) -> Meal:
        ...

    @abstractmethod
    async def add_manual_meal(self, meal: ManualMealRequest) -> Meal:
        ...

    @abstractmethod
    async def delete_meal(self, meal_id: int) -> None:
        ...

    @abstractmethod
    async def get_dinner_ideas(self) -> DinnerIdeas:
        ...

    @abstractmethod
    async def scan_product(self, image: bytes) -> ScannedProduct:
        ...


class LanguagesApi(ABC):
    """Port — language learning endpoints."""

    @abstractmethod
    async def get_vocabulary(self) -> list[VocabWord]:
        ...

    @abstractmethod
    async def mark_word_learned(self, word_id: int) -> None:
        ...

    @abstractmethod
    async def get_learning_streak(self) -> LearningStreak:
        ...

    @abstractmethod
    async def roleplay(
        self, scenario: str, message: str, history: list[str] | None = None
    ) -> RoleplayReply:
        ...


class LogisticsApi(ABC):
    """Port — places, routing and traffic endpoints."""

    @abstractmethod
    async def search_place(
        self, query: str, lat: float | None = None, lon: float | None = None
    ) -> list[Place]:
        ...

    @abstractmethod
    async def get_route(
        self,
        from_lat: float,
        from_lon: float,
        to_lat: float,
        to_lon: float,
        transport: str = "car",
    ) -> Route:
        ...

    @abstractmethod
    async def get_traffic_advice(self, destination: str) -> TrafficAdvice:
        ...

    @abstractmethod
    async def parse_task(self, text: str) -> ParsedTask:
        ...
