"""Domain-specific exceptions — framework-independent."""


class AuraApiError(Exception):
    """Base class for every failure of a call to the Aura backend."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NetworkError(AuraApiError):
    """Raised when the request never produced an HTTP response.

    Covers URL construction failures as well as transport errors
    (DNS, refused connection, timeout).
    """

    def __init__(self, message: str = "No connection to the server"):
        super().__init__(message)


class UnauthorizedError(AuraApiError):
    """Raised on HTTP 401, regardless of the response payload."""

    status_code = 401

    def __init__(self, message: str = "Authorization required"):
        super().__init__(message)


class ServerError(AuraApiError):
    """Raised on any other non-2xx status or an undecodable response body.

    ``message`` is the user-facing detail; ``raw_text`` always holds the
    response body exactly as received.
    """

    def __init__(self, message: str, raw_text: str = "", status_code: int | None = None):
        self.raw_text = raw_text
        self.status_code = status_code
        super().__init__(message)
