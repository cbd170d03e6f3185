"""Explicit call outcome for the use-case services.

Screens never see a raised AuraApiError unless their policy says so:
``capture`` turns a backend failure into a failed Result, and the service
decides whether to degrade (empty list, None, fallback text) or surface it.
"""

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

from aura_client.domain.exceptions import AuraApiError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Result(Generic[T]):
    """Either a value or the AuraApiError that prevented it.

    ``message`` is what a screen shows for a failure; it defaults to the
    error's own message.
    """

    value: T | None = None
    error: AuraApiError | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: T) -> T:
        if self.error is not None or self.value is None:
            return default
        return self.value

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AuraApiError, message: str | None = None) -> "Result[T]":
        return cls(error=error, message=message or error.message)


async def capture(
    awaitable: Awaitable[T],
    *,
    operation: str = "",
    failure_message: str | None = None,
) -> Result[T]:
    """Await a backend call and wrap its outcome.

    Only AuraApiError is captured; cancellation and programming errors
    propagate unchanged.
    """
    try:
        value = await awaitable
    except AuraApiError as exc:
        logger.warning("%s failed: %s", operation or "Backend call", exc.message)
        return Result.failure(exc, failure_message)
    return Result.success(value)
