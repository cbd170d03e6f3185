"""End-to-end tests: login against the fake backend, then authenticated calls."""

import httpx
import pytest
from httpx import ASGITransport

from aura_client.config import Settings
from aura_client.domain.entities import WatchStatus
from aura_client.domain.exceptions import ServerError, UnauthorizedError
from aura_client.infrastructure.storage.json_file_store import InMemoryKeyValueStore
from aura_client.main import create_app
from tests.integration.services.fake_aura_backend import (
    VALID_EMAIL,
    VALID_PASSWORD,
    create_fake_backend,
)


def _settings() -> Settings:
    return Settings(_env_file=None, api_base_url="http://test")


@pytest.mark.asyncio
async def test_login_stores_token_and_later_calls_send_it():
    backend, log = create_fake_backend()
    store = InMemoryKeyValueStore()

    async with httpx.AsyncClient(transport=ASGITransport(app=backend), base_url="http://test") as http:
        app = create_app(_settings(), http_client=http, store=store)
        assert not app.session.is_logged_in

        await app.auth.login(VALID_EMAIL, VALID_PASSWORD)
        user = await app.auth.current_user()

    assert store.get("auth_token") == "abc"
    assert log.login_forms == [{"username": [VALID_EMAIL], "password": [VALID_PASSWORD]}]
    assert log.authorization[-1] == "Bearer abc"
    assert user.full_name == "Ana"


@pytest.mark.asyncio
async def test_wrong_password_is_reported_and_nothing_stored():
    backend, _ = create_fake_backend()
    store = InMemoryKeyValueStore()

    async with httpx.AsyncClient(transport=ASGITransport(app=backend), base_url="http://test") as http:
        app = create_app(_settings(), http_client=http, store=store)
        with pytest.raises(UnauthorizedError) as exc_info:
            await app.auth.login(VALID_EMAIL, "wrong")

    assert exc_info.value.message == "Invalid email or password"
    assert store.get("auth_token") is None


@pytest.mark.asyncio
async def test_register_then_duplicate():
    backend, log = create_fake_backend()

    async with httpx.AsyncClient(transport=ASGITransport(app=backend), base_url="http://test") as http:
        app = create_app(_settings(), http_client=http, store=InMemoryKeyValueStore())
        token = await app.auth.register("new@example.com", "pw", "New Person")
        with pytest.raises(ServerError) as exc_info:
            await app.auth.register(VALID_EMAIL, "pw", "Ana")

    assert token.user.email == "new@example.com"
    assert log.register_bodies[0] == {
        "username": "new@example.com",
        "email": "new@example.com",
        "password": "pw",
        "full_name": "New Person",
    }
    assert "Email already registered" in exc_info.value.message


@pytest.mark.asyncio
async def test_logged_in_cinema_flow():
    backend, _ = create_fake_backend()

    async with httpx.AsyncClient(transport=ASGITransport(app=backend), base_url="http://test") as http:
        app = create_app(_settings(), http_client=http, store=InMemoryKeyValueStore())
        await app.auth.login(VALID_EMAIL, VALID_PASSWORD)

        state = await app.cinema.load_all()
        result = await app.cinema.mark_watched(78)

    assert [m.title for m in state.unique_trending] == ["The Matrix", "Blade Runner"]
    assert result.ok
    assert [m.watch_status for m in app.cinema.state.my_movies] == [WatchStatus.WATCHED]
