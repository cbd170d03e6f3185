from .user import User, AuthToken
from .movie import (
    Movie,
    WatchStatus,
    MovieDetails,
    CastMember,
    MovieWord,
    deduplicate_movies,
)
from .meal import (
    Meal,
    MealType,
    DailySummary,
    DinnerIdeas,
    ScannedProduct,
    DEFAULT_CALORIE_GOAL,
)
from .vocabulary import VocabWord, LearningStreak, RoleplayReply
from .place import Place, Route, TrafficAdvice, ParsedTask

__all__ = [
    "User",
    "AuthToken",
    "Movie",
    "WatchStatus",
    "MovieDetails",
    "CastMember",
    "MovieWord",
    "deduplicate_movies",
    "Meal",
    "MealType",
    "DailySummary",
    "DinnerIdeas",
    "ScannedProduct",
    "DEFAULT_CALORIE_GOAL",
    "VocabWord",
    "LearningStreak",
    "RoleplayReply",
    "Place",
    "Route",
    "TrafficAdvice",
    "ParsedTask",
]
