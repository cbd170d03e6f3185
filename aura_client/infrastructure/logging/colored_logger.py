"""Colored API call logger — ANSI-colored console logging for backend calls.

Provides an ApiCallLogger with color-coded output per backend area,
making it easy to visually trace which screen issued which request.

Color scheme:
    🟢 Green   — Auth
    🟣 Magenta — Cinema
    🟡 Yellow  — Food
    🔵 Blue    — Languages
    🟠 Cyan    — Logistics
    🔴 Red     — Errors
    ⚪ Gray    — Timing / details
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


# ── Backend Areas ────────────────────────────────────────────────────

class ApiArea:
    """Backend areas with colors and icons, keyed by the first path segment."""

    AUTH = ("AUTH", _Colors.GREEN, "🔑")
    CINEMA = ("CINEMA", _Colors.MAGENTA, "🎬")
    FOOD = ("FOOD", _Colors.YELLOW, "🍽️")
    LANGUAGES = ("LANGUAGES", _Colors.BLUE, "🗣️")
    LOGISTICS = ("LOGISTICS", _Colors.CYAN, "🧭")
    OTHER = ("API", _Colors.WHITE, "🌐")

    _BY_PREFIX = {
        "auth": AUTH,
        "cinema": CINEMA,
        "food": FOOD,
        "languages": LANGUAGES,
        "logistics": LOGISTICS,
    }

    @classmethod
    def for_path(cls, path: str) -> tuple[str, str, str]:
        """Resolve the area of a request path such as ``/food/today``."""
        segment = path.lstrip("/").split("/", 1)[0].split("?", 1)[0]
        return cls._BY_PREFIX.get(segment, cls.OTHER)


# ── ApiCallLogger ────────────────────────────────────────────────────

class ApiCallLogger:
    """Color-coded logger for outbound Aura API calls.

    Usage:
        log = ApiCallLogger(__name__)
        with log.timed_call(ApiArea.for_path(path), f"GET {path}"):
            response = await client.get(url)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def call_start(self, area: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = area
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.debug(formatted)

    def call_complete(self, area: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = area
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.info(formatted)

    def call_error(self, area: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a failed call in red."""
        label, _, icon = area
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.warning(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.DIM}({details}){_Colors.RESET}"
        self._logger.debug(formatted)

    @contextmanager
    def timed_call(self, area: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time.

        Usage:
            with log.timed_call(ApiArea.FOOD, "GET /food/today"):
                response = await client.get(url)
        """
        self.call_start(area, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.call_error(area, f"{message} — failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.call_complete(area, f"{message} — {elapsed:.2f}s", **kwargs)
