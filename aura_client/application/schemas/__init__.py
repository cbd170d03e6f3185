from .auth import UserSchema, TokenResponseSchema, RegisterRequest
from .cinema import (
    MovieSchema,
    MovieResultsSchema,
    MovieListSchema,
    CastMemberSchema,
    MovieDetailsSchema,
    MovieWordSchema,
    MovieWordsResponse,
    FilmCritiqueResponse,
)
from .food import (
    MealSchema,
    DailySummarySchema,
    ManualMealRequest,
    DinnerIdeasSchema,
    ScannedProductSchema,
)
from .languages import (
    VocabWordSchema,
    StreakSchema,
    RoleplayRequest,
    RoleplayResponseSchema,
)
from .logistics import (
    PlaceSchema,
    PlaceSearchResponse,
    RouteRequest,
    RouteSchema,
    TrafficAdviceSchema,
    ParseTaskRequest,
    ParsedTaskSchema,
)

__all__ = [
    "UserSchema",
    "TokenResponseSchema",
    "RegisterRequest",
    "MovieSchema",
    "MovieResultsSchema",
    "MovieListSchema",
    "CastMemberSchema",
    "MovieDetailsSchema",
    "MovieWordSchema",
    "MovieWordsResponse",
    "FilmCritiqueResponse",
    "MealSchema",
    "DailySummarySchema",
    "ManualMealRequest",
    "DinnerIdeasSchema",
    "ScannedProductSchema",
    "VocabWordSchema",
    "StreakSchema",
    "RoleplayRequest",
    "RoleplayResponseSchema",
    "PlaceSchema",
    "PlaceSearchResponse",
    "RouteRequest",
    "RouteSchema",
    "TrafficAdviceSchema",
    "ParseTaskRequest",
    "ParsedTaskSchema",
]
