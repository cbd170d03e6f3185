"""Wire DTO → domain entity conversion."""

from aura_client.application.schemas import (
    DailySummarySchema,
    DinnerIdeasSchema,
    MealSchema,
    MovieDetailsSchema,
    MovieListSchema,
    MovieResultsSchema,
    MovieSchema,
    MovieWordSchema,
    ParsedTaskSchema,
    PlaceSchema,
    RoleplayResponseSchema,
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
    CastMember,
    DailySummary,
    DinnerIdeas,
    LearningStreak,
    Meal,
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
    WatchStatus,
)


def _year(value: int | str | None) -> str | None:
    return None if value is None else str(value)


def to_user(data: UserSchema) -> User:
    return User(**data.model_dump())


def to_auth_token(data: TokenResponseSchema) -> AuthToken:
    return AuthToken(
        access_token=data.access_token,
        token_type=data.token_type,
        user=to_user(data.user),
    )


def to_movie(data: MovieSchema) -> Movie:
    return Movie(
        id=data.id,
        tmdb_id=data.tmdb_id,
        title=data.title,
        year=_year(data.year),
        rating=data.rating,
        poster_url=data.poster_url,
        watch_status=WatchStatus.from_flag(data.watched),
        overview=data.overview,
        review=data.review,
    )


def to_movies(data: MovieListSchema) -> list[Movie]:
    """Accept both the bare-array and the ``{"results": [...]}`` list shapes."""
    items = data.results if isinstance(data, MovieResultsSchema) else data
    return [to_movie(item) for item in items]


def to_movie_details(data: MovieDetailsSchema) -> MovieDetails:
    return MovieDetails(
        title=data.title,
        tmdb_id=data.tmdb_id,
        original_title=data.original_title,
        year=_year(data.year),
        runtime=data.runtime,
        rating=data.rating,
        vote_count=data.vote_count,
        genres=list(data.genres),
        tagline=data.tagline,
        overview=data.overview,
        cast=[CastMember(**c.model_dump()) for c in data.cast],
        directors=list(data.directors),
        writers=list(data.writers),
        poster_url=data.poster_url,
        backdrop_url=data.backdrop_url,
    )


def to_movie_word(data: MovieWordSchema) -> MovieWord:
    return MovieWord(**data.model_dump())


def to_meal(data: MealSchema) -> Meal:
    return Meal(**data.model_dump())


def to_daily_summary(data: DailySummarySchema) -> DailySummary:
    return DailySummary(
        date=data.date,
        total_calories=data.total_calories,
        total_proteins=data.total_proteins,
        total_fats=data.total_fats,
        total_carbs=data.total_carbs,
        meals=[to_meal(m) for m in data.meals or []],
        ai_advice=data.ai_advice,
        calorie_goal=data.calorie_goal,
    )


def to_dinner_ideas(data: DinnerIdeasSchema) -> DinnerIdeas:
    return DinnerIdeas(ideas=data.ideas, calories_remaining=data.calories_remaining)


def to_scanned_product(data: ScannedProductSchema) -> ScannedProduct:
    return ScannedProduct(**data.model_dump())


def to_vocab_word(data: VocabWordSchema) -> VocabWord:
    return VocabWord(**data.model_dump())


def to_streak(data: StreakSchema) -> LearningStreak:
    return LearningStreak(**data.model_dump())


def to_roleplay_reply(data: RoleplayResponseSchema) -> RoleplayReply:
    return RoleplayReply(**data.model_dump())


def to_place(data: PlaceSchema) -> Place:
    return Place(**data.model_dump())


def to_route(data: RouteSchema) -> Route:
    return Route(**data.model_dump())


def to_traffic_advice(data: TrafficAdviceSchema) -> TrafficAdvice:
    return TrafficAdvice(**data.model_dump())


def to_parsed_task(data: ParsedTaskSchema) -> ParsedTask:
    return ParsedTask(**data.model_dump())
