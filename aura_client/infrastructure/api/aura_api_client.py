"""Aura API client — the endpoint catalogue of the Aura backend.

Each method is a thin specialization of the RequestExecutor: a fixed
path, method and body shape, plus the expected response type. Errors are
the domain taxonomy (NetworkError / UnauthorizedError / ServerError);
this layer never swallows them, the use-case services decide.
"""

import logging

from aura_client.application.interfaces import (
    AuthApi,
    CinemaApi,
    FoodApi,
    LanguagesApi,
    LogisticsApi,
)
from aura_client.application.schemas import (
    DailySummarySchema,
    DinnerIdeasSchema,
    FilmCritiqueResponse,
    ManualMealRequest,
    MealSchema,
    MovieDetailsSchema,
    MovieListSchema,
    MovieSchema,
    MovieWordsResponse,
    ParsedTaskSchema,
    ParseTaskRequest,
    PlaceSearchResponse,
    RegisterRequest,
    RoleplayRequest,
    RoleplayResponseSchema,
    RouteRequest,
    RouteSchema,
    ScannedProductSchema,
    StreakSchema,
    TokenResponseSchema,
    TrafficAdviceSchema,
    UserSchema,
    VocabWordSchema,
)
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
from aura_client.domain.exceptions import ServerError, UnauthorizedError
from aura_client.infrastructure.api import mappers
from aura_client.infrastructure.api.request_executor import RequestExecutor

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
REGISTRATION_FAILED_MESSAGE = "Registration failed"


class AuraApiClient(AuthApi, CinemaApi, FoodApi, LanguagesApi, LogisticsApi):
    """Infrastructure adapter — typed access to every Aura backend endpoint."""

    def __init__(self, executor: RequestExecutor):
        self._executor = executor

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    # ── Auth ────────────────────────────────────────────────────────

    async def login(self, email: str, password: str) -> AuthToken:
        """Exchange credentials for a token (form-encoded, OAuth2 password style).

        Any failure to obtain a token is reported as invalid credentials:
        401 as UnauthorizedError, everything else as ServerError.
        """
        response = await self._executor.post_form(
            "/auth/login", {"username": email, "password": password}
        )
        try:
            data = self._executor.decode(response, TokenResponseSchema)
        except UnauthorizedError as exc:
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE) from exc
        except ServerError as exc:
            raise ServerError(
                INVALID_CREDENTIALS_MESSAGE,
                raw_text=exc.raw_text,
                status_code=exc.status_code,
            ) from exc
        return mappers.to_auth_token(data)

    async def register(self, email: str, password: str, full_name: str) -> AuthToken:
        """Create an account; the backend answers 201 with a token on success."""
        body = RegisterRequest(
            username=email, email=email, password=password, full_name=full_name
        )
        response = await self._executor.send(
            "POST", "/auth/register", json=body.model_dump(mode="json")
        )
        if response.status_code == 401:
            raise UnauthorizedError()
        if response.status_code != 201:
            raise ServerError(
                response.text or REGISTRATION_FAILED_MESSAGE,
                raw_text=response.text,
                status_code=response.status_code,
            )
        try:
            data = self._executor.decode(response, TokenResponseSchema)
        except ServerError as exc:
            raise ServerError(
                REGISTRATION_FAILED_MESSAGE,
                raw_text=exc.raw_text,
                status_code=exc.status_code,
            ) from exc
        return mappers.to_auth_token(data)

    async def get_me(self) -> User:
        data = await self._executor.request("/auth/me", UserSchema)
        return mappers.to_user(data)

    # ── Cinema ──────────────────────────────────────────────────────

    async def get_trending(self) -> list[Movie]:
        data = await self._executor.request("/cinema/trending", MovieListSchema)
        return mappers.to_movies(data)

    async def get_my_movies(self) -> list[Movie]:
        data = await self._executor.request("/cinema/my-list", MovieListSchema)
        return mappers.to_movies(data)

    async def search_movies(self, query: str) -> list[Movie]:
        data = await self._executor.request(
            "/cinema/search", MovieListSchema, params={"query": query}
        )
        return mappers.to_movies(data)

    async def mark_watched(self, tmdb_id: int, review: str | None = None) -> Movie:
        data = await self._executor.request(
            f"/cinema/watched/{tmdb_id}",
            MovieSchema,
            method="POST",
            params={"review": review},
        )
        return mappers.to_movie(data)

    async def add_to_watchlist(self, tmdb_id: int) -> Movie:
        data = await self._executor.request(
            f"/cinema/watchlist/{tmdb_id}", MovieSchema, method="POST"
        )
        return mappers.to_movie(data)

    async def get_movie_details(self, tmdb_id: int) -> MovieDetails:
        data = await self._executor.request(f"/cinema/movie/{tmdb_id}", MovieDetailsSchema)
        return mappers.to_movie_details(data)

    async def get_movie_words(self, tmdb_id: int) -> list[MovieWord]:
        data = await self._executor.request(
            f"/cinema/movie/{tmdb_id}/words", MovieWordsResponse
        )
        return [mappers.to_movie_word(w) for w in data.words]

    async def get_film_critique(self, tmdb_id: int) -> str:
        data = await self._executor.request(
            f"/cinema/movie/{tmdb_id}/critique", FilmCritiqueResponse
        )
        return data.critique

    # ── Food ────────────────────────────────────────────────────────

    async def get_today_summary(self) -> DailySummary:
        data = await self._executor.request("/food/today", DailySummarySchema)
        return mappers.to_daily_summary(data)

    async def get_meal_history(self) -> list[Meal]:
        data = await self._executor.request("/food/history", list[MealSchema])
        return [mappers.to_meal(m) for m in data]

    async def analyze_food_photo(
        self, image: bytes, meal_type: MealType = MealType.SNACK
    ) -> Meal:
        """Upload a meal photo; the backend estimates and logs the meal."""
        response = await self._executor.post_multipart(
            "/food/analyze-photo", image, params={"meal_type": MealType(meal_type).value}
        )
        data = self._executor.decode(response, MealSchema)
        return mappers.to_meal(data)

    async def add_manual_meal(self, meal: ManualMealRequest) -> Meal:
        data = await self._executor.request(
            "/food/manual", MealSchema, method="POST", body=meal
        )
        return mappers.to_meal(data)

    async def delete_meal(self, meal_id: int) -> None:
        await self._executor.request(f"/food/meal/{meal_id}", dict, method="DELETE")

    async def get_dinner_ideas(self) -> DinnerIdeas:
        data = await self._executor.request(
            "/food/dinner-ideas", DinnerIdeasSchema, method="POST"
        )
        return mappers.to_dinner_ideas(data)

    async def scan_product(self, image: bytes) -> ScannedProduct:
        """Upload a product-label photo and read its nutrition facts."""
        response = await self._executor.post_multipart("/food/scan-label", image)
        data = self._executor.decode(response, ScannedProductSchema)
        return mappers.to_scanned_product(data)

    # ── Languages ───────────────────────────────────────────────────

    async def get_vocabulary(self) -> list[VocabWord]:
        data = await self._executor.request("/languages/vocabulary", list[VocabWordSchema])
        return [mappers.to_vocab_word(w) for w in data]

    async def mark_word_learned(self, word_id: int) -> None:
        await self._executor.request(
            f"/languages/vocabulary/{word_id}/learned", dict, method="PATCH"
        )

    async def get_learning_streak(self) -> LearningStreak:
        data = await self._executor.request("/languages/streak", StreakSchema)
        return mappers.to_streak(data)

    async def roleplay(
        self, scenario: str, message: str, history: list[str] | None = None
    ) -> RoleplayReply:
        body = RoleplayRequest(scenario=scenario, message=message, history=history or [])
        data = await self._executor.request(
            "/languages/roleplay", RoleplayResponseSchema, method="POST", body=body
        )
        return mappers.to_roleplay_reply(data)

    # ── Logistics ───────────────────────────────────────────────────

    async def search_place(
        self, query: str, lat: float | None = None, lon: float | None = None
    ) -> list[Place]:
        params: dict[str, object] = {"q": query}
        # Coordinates only make sense as a pair.
        if lat is not None and lon is not None:
            params["lat"] = lat
            params["lon"] = lon
        data = await self._executor.request(
            "/logistics/search-place", PlaceSearchResponse, params=params
        )
        return [mappers.to_place(p) for p in data.results]

    async def get_route(
        self,
        from_lat: float,
        from_lon: float,
        to_lat: float,
        to_lon: float,
        transport: str = "car",
    ) -> Route:
        body = RouteRequest(
            from_lat=from_lat,
            from_lon=from_lon,
            to_lat=to_lat,
            to_lon=to_lon,
            transport=transport,
        )
        data = await self._executor.request(
            "/logistics/route", RouteSchema, method="POST", body=body
        )
        return mappers.to_route(data)

    async def get_traffic_advice(self, destination: str) -> TrafficAdvice:
        data = await self._executor.request(
            "/logistics/traffic-advice",
            TrafficAdviceSchema,
            params={"destination": destination},
        )
        return mappers.to_traffic_advice(data)

    async def parse_task(self, text: str) -> ParsedTask:
        data = await self._executor.request(
            "/logistics/parse-task",
            ParsedTaskSchema,
            method="POST",
            body=ParseTaskRequest(text=text),
        )
        return mappers.to_parsed_task(data)
