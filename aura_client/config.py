import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    app_name: str = "Aura"
    app_env: str = "development"

    # Aura backend
    api_base_url: str = "https://aura-api.ddns.net"
    request_timeout: float | None = None     # None = httpx defaults

    # Local key-value state (token + preferences)
    state_file: str = "data/state.json"

    # Screen defaults
    default_calorie_goal: int = 2200
    default_traffic_destination: str = "work"
    default_learning_language: str = "German"
    rollback_failed_mutations: bool = True

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_api: str = "INFO"              # Aura request executor + endpoints
    log_level_services: str = "INFO"         # Screen use-case services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Normalise the base URL so paths can be appended verbatim."""
        if self.api_base_url.endswith("/"):
            object.__setattr__(self, "api_base_url", self.api_base_url.rstrip("/"))
            _config_logger.debug("Stripped trailing slash from api_base_url")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
