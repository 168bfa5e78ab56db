"""Exception hierarchy for the GraphQL HTTP client."""

from typing import Optional


class GraphQLClientError(Exception):
    """Base error for everything raised by gqlhttp."""


class InvalidEndpoint(GraphQLClientError):
    """Raised at client construction when the endpoint URL is malformed."""


class RequestError(GraphQLClientError):
    """Base error for failures of a single ``send`` call."""


class TransportError(RequestError):
    """Raised when the connection or HTTP exchange itself fails."""


class HttpError(RequestError):
    """Raised for a non-success HTTP status. The body is never parsed."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class NotAuthorized(HttpError):
    """Raised on 401."""


class Forbidden(HttpError):
    """Raised on 403."""


class Throttled(HttpError):
    """Raised on 429."""

    def __init__(self, message: str, status_code: int = 429, retry_after: Optional[str] = None):
        super().__init__(message, status_code)
        self.retry_after = retry_after


class ServerError(HttpError):
    """Raised on any 5xx."""


class SerializationError(RequestError):
    """Raised when the request body cannot be written."""


class DecodeError(RequestError):
    """Raised when a response body is not valid JSON or does not match the shape."""


class ReleasedError(RuntimeError):
    """Raised on access to, or a second release of, a released ``Owned`` value."""
