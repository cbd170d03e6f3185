"""Unit tests for Result and capture."""

import asyncio

import pytest

from aura_client.application.services import Result, capture
from aura_client.domain.exceptions import ServerError


async def _value(value):
    return value


async def _raise(exc: Exception):
    raise exc


@pytest.mark.asyncio
async def test_capture_success():
    result = await capture(_value([1, 2]))

    assert result.ok
    assert result.value == [1, 2]
    assert result.error is None


@pytest.mark.asyncio
async def test_capture_backend_failure_with_custom_message():
    result = await capture(
        _raise(ServerError("boom", raw_text="boom", status_code=500)),
        operation="Add meal",
        failure_message="Could not add meal",
    )

    assert not result.ok
    assert isinstance(result.error, ServerError)
    assert result.message == "Could not add meal"
    assert result.value_or("fallback") == "fallback"


@pytest.mark.asyncio
async def test_capture_does_not_swallow_programming_errors():
    with pytest.raises(KeyError):
        await capture(_raise(KeyError("missing")))


@pytest.mark.asyncio
async def test_capture_propagates_cancellation():
    with pytest.raises(asyncio.CancelledError):
        await capture(_raise(asyncio.CancelledError()))


def test_value_or_on_success_with_none_value():
    assert Result.success(None).value_or([]) == []
    assert Result.failure(ServerError("x")).message == "x"
