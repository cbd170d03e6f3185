from .result import Result, capture
from .session_store import SessionStore
from .preferences_service import PreferencesService
from .auth_service import AuthService
from .cinema_service import CinemaService, CinemaState
from .food_service import FoodService, FoodState
from .languages_service import (
    LanguagesService,
    LanguagesState,
    RoleplayConversation,
    RoleplayTurn,
)
from .logistics_service import LogisticsService, LogisticsState
from .movie_quiz import MovieQuiz
from .profile_service import ProfileService, ProfileState

__all__ = [
    "Result",
    "capture",
    "SessionStore",
    "PreferencesService",
    "AuthService",
    "CinemaService",
    "CinemaState",
    "FoodService",
    "FoodState",
    "LanguagesService",
    "LanguagesState",
    "RoleplayConversation",
    "RoleplayTurn",
    "LogisticsService",
    "LogisticsState",
    "MovieQuiz",
    "ProfileService",
    "ProfileState",
]
