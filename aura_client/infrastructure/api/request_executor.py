"""Generic request executor for the Aura backend.

Turns (path, method, body) into an authenticated httpx call and the
response into a validated, typed value, translating every failure into
the domain error taxonomy:

    NetworkError      — URL construction or transport failure
    UnauthorizedError — HTTP 401, whatever the payload
    ServerError       — any other non-2xx status or an undecodable body
"""

import logging
import uuid
from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from aura_client.application.services.session_store import SessionStore
from aura_client.domain.exceptions import NetworkError, ServerError, UnauthorizedError
from aura_client.infrastructure.logging.colored_logger import ApiArea, ApiCallLogger

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def build_multipart_body(
    payload: bytes,
    boundary: str,
    *,
    field_name: str = "file",
    filename: str = "photo.jpg",
    content_type: str = "image/jpeg",
) -> bytes:
    """Build a ``multipart/form-data`` body holding exactly one file part."""
    head = (
        f"--{boundary}\r\n"
        f'Content-Disposition: form-data; name="{field_name}"; filename="{filename}"\r\n'
        f"Content-Type: {content_type}\r\n\r\n"
    ).encode("utf-8")
    tail = f"\r\n--{boundary}--\r\n".encode("utf-8")
    return head + payload + tail


def _error_detail(response: httpx.Response) -> str:
    """Extract a user-facing message from an error response.

    The backend answers errors FastAPI-style (``{"detail": "..."}``);
    anything else falls back to the raw body.
    """
    try:
        data = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(data, dict) and isinstance(data.get("detail"), str):
        return data["detail"]
    return response.text


class RequestExecutor:
    """Infrastructure adapter — the single HTTP seam of the client.

    Uses an injected ``httpx.AsyncClient`` when given (connection pooling,
    test transports); otherwise opens and closes a client per call.
    """

    def __init__(
        self,
        base_url: str,
        session: SessionStore,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._http_client = http_client
        self._timeout = timeout
        self._log = ApiCallLogger(__name__)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> SessionStore:
        return self._session

    # ── Headers / URLs ──────────────────────────────────────────────

    def _auth_headers(self) -> dict[str, str]:
        """Bearer header when the session holds a token, else nothing."""
        token = self._session.get()
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    def _json_headers(self) -> dict[str, str]:
        return {"Content-Type": JSON_CONTENT_TYPE, **self._auth_headers()}

    def _build_url(self, path: str) -> httpx.URL:
        try:
            return httpx.URL(f"{self._base_url}{path}")
        except httpx.InvalidURL as exc:
            raise NetworkError(f"Invalid request URL for path '{path}'") from exc

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        if self._timeout is not None:
            return httpx.AsyncClient(timeout=self._timeout)
        return httpx.AsyncClient()

    # ── Sending ─────────────────────────────────────────────────────

    async def send(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        json: Any = None,
        content: bytes | None = None,
    ) -> httpx.Response:
        """Perform one HTTP call and return the raw response.

        Transport-level failures become NetworkError; the status code is
        not inspected here.
        """
        url = self._build_url(path)
        query = {k: v for k, v in (params or {}).items() if v is not None}

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            with self._log.timed_call(ApiArea.for_path(path), f"{method} {path}"):
                try:
                    response = await client.request(
                        method,
                        url,
                        headers=headers if headers is not None else self._json_headers(),
                        params=query or None,
                        json=json,
                        content=content,
                    )
                except (httpx.RequestError, httpx.InvalidURL) as exc:
                    raise NetworkError() from exc
        finally:
            if should_close:
                await client.aclose()

        self._log.detail("Response received", status=response.status_code, bytes=len(response.content))
        return response

    def decode(self, response: httpx.Response, response_type: type[T] | Any) -> T:
        """Validate a response body against ``response_type``."""
        if response.status_code == 401:
            raise UnauthorizedError()

        if not response.is_success:
            raise ServerError(
                _error_detail(response),
                raw_text=response.text,
                status_code=response.status_code,
            )

        body = response.content.strip() or b"{}"
        try:
            return _adapter(response_type).validate_json(body)
        except ValidationError as exc:
            logger.debug("Could not decode %s as %s: %s", response.url, response_type, exc)
            raise ServerError(
                response.text or "Empty response",
                raw_text=response.text,
                status_code=response.status_code,
            ) from exc

    async def request(
        self,
        path: str,
        response_type: type[T] | Any,
        *,
        method: str = "GET",
        body: BaseModel | dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> T:
        """Send a JSON request and decode the typed result."""
        payload = body.model_dump(mode="json") if isinstance(body, BaseModel) else body
        response = await self.send(method, path, params=params, json=payload)
        return self.decode(response, response_type)

    async def post_form(self, path: str, fields: dict[str, str]) -> httpx.Response:
        """POST an ``application/x-www-form-urlencoded`` body."""
        headers = {"Content-Type": FORM_CONTENT_TYPE, **self._auth_headers()}
        content = urlencode(fields).encode("utf-8")
        return await self.send("POST", path, headers=headers, content=content)

    async def post_multipart(
        self,
        path: str,
        file_bytes: bytes,
        *,
        params: dict[str, Any] | None = None,
        filename: str = "photo.jpg",
        content_type: str = "image/jpeg",
    ) -> httpx.Response:
        """POST a single-file ``multipart/form-data`` body."""
        boundary = uuid.uuid4().hex
        headers = {
            "Content-Type": f"multipart/form-data; boundary={boundary}",
            **self._auth_headers(),
        }
        content = build_multipart_body(
            file_bytes, boundary, filename=filename, content_type=content_type
        )
        return await self.send("POST", path, headers=headers, params=params, content=content)
