"""A small GraphQL-over-HTTP client with typed response envelopes."""

from .client import GraphQLClient, StatusClass, classify_status
from .codec import decode_response, encode_request
from .errors import (
    DecodeError,
    Forbidden,
    GraphQLClientError,
    HttpError,
    InvalidEndpoint,
    NotAuthorized,
    ReleasedError,
    RequestError,
    SerializationError,
    ServerError,
    Throttled,
    TransportError,
)
from .models import (
    DataResult,
    Error,
    ErrorsResult,
    Location,
    Owned,
    Request,
    Response,
    ResponseKind,
)

__all__ = [
    "DataResult",
    "DecodeError",
    "Error",
    "ErrorsResult",
    "Forbidden",
    "GraphQLClient",
    "GraphQLClientError",
    "HttpError",
    "InvalidEndpoint",
    "Location",
    "NotAuthorized",
    "Owned",
    "ReleasedError",
    "Request",
    "RequestError",
    "Response",
    "ResponseKind",
    "SerializationError",
    "ServerError",
    "StatusClass",
    "Throttled",
    "TransportError",
    "classify_status",
    "decode_response",
    "encode_request",
]
