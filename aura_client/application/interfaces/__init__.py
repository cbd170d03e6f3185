from .key_value_store import KeyValueStore, Scalar
from .aura_api import AuthApi, CinemaApi, FoodApi, LanguagesApi, LogisticsApi

__all__ = [
    "KeyValueStore",
    "Scalar",
    "AuthApi",
    "CinemaApi",
    "FoodApi",
    "LanguagesApi",
    "LogisticsApi",
]
