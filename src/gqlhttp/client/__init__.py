"""GraphQLClient: encode, post, classify, decode."""

import logging
import sys
from typing import Dict, Optional, Type, TypeVar, Union
from urllib.parse import ParseResult, SplitResult

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from ..codec import decode_response, encode_request
from ..config import ClientOptions
from ..errors import InvalidEndpoint
from ..models import Owned, Request, Response
from .status import StatusClass, classify_status, raise_for_status
from .transport import RequestsTransport, Transport, TransportResponse

# ---------------------------------------------------------------------------
# Configure the package-level logger once. A single StreamHandler on stderr
# lets all child loggers (gqlhttp.client, gqlhttp.codec, ...) propagate here.
# ---------------------------------------------------------------------------
_root_logger = logging.getLogger("gqlhttp")
if not _root_logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _root_logger.addHandler(_handler)
    _root_logger.setLevel(logging.INFO)

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

_URL_ADAPTER = TypeAdapter(AnyHttpUrl)

T = TypeVar("T")

Endpoint = Union[str, AnyHttpUrl, ParseResult, SplitResult]


def validate_endpoint(endpoint: Endpoint) -> str:
    """Return ``endpoint`` as a URL string, raising ``InvalidEndpoint`` if it is not HTTP(S)."""
    if isinstance(endpoint, (ParseResult, SplitResult)):
        endpoint = endpoint.geturl()
    try:
        return str(_URL_ADAPTER.validate_python(str(endpoint)))
    except ValidationError as e:
        raise InvalidEndpoint(f"Invalid GraphQL endpoint {endpoint!r}: {e}") from e


class GraphQLClient:
    """A simple GraphQL HTTP client.

    The endpoint is validated here so a bad URL fails at construction rather
    than on the first ``send``. Instances hold configuration only and may be
    reused sequentially; call ``close()`` (or use ``with``) when finished.
    """

    def __init__(
        self,
        endpoint: Endpoint,
        authorization: Optional[str] = None,
        transport: Optional[Transport] = None,
    ):
        self.endpoint = validate_endpoint(endpoint)
        self.authorization = authorization
        self.transport = transport if transport is not None else RequestsTransport()
        self.logger = logging.getLogger("gqlhttp.client")

    @classmethod
    def from_options(cls, options: ClientOptions) -> "GraphQLClient":
        return cls(
            options.endpoint,
            authorization=options.authorization,
            transport=RequestsTransport(timeout=options.timeout),
        )

    # Level of the whole ``gqlhttp`` logger tree, so codec and transport
    # debug output follows the client setting.
    @property
    def log_level(self) -> str:
        return logging.getLevelName(_root_logger.level)

    @log_level.setter
    def log_level(self, value: str) -> None:
        _root_logger.setLevel(_LEVEL_MAP.get(value.upper(), logging.INFO))

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.authorization:
            headers["Authorization"] = self.authorization
        return headers

    def send(self, request: Request, shape: Type[T]) -> Owned[Response[T]]:
        """Send a GraphQL request and decode the reply as ``Response[shape]``.

        The caller owns the returned value and must ``release()`` it (or use it
        as a context manager). Non-success statuses raise before the body is
        read as GraphQL.
        """
        body = encode_request(request)
        self.logger.debug(f"sending operation {request.operationName or '<anonymous>'} to {self.endpoint}")
        response: TransportResponse = self.transport.post_json(self.endpoint, self._headers(), body)
        self.logger.debug(f"response {response.status_code}")
        raise_for_status(response.status_code, response.headers)
        return decode_response(response.body, shape)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "GraphQLClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = [
    "Endpoint",
    "GraphQLClient",
    "RequestsTransport",
    "StatusClass",
    "Transport",
    "TransportResponse",
    "classify_status",
    "raise_for_status",
    "validate_endpoint",
]
