"""HTTP transport used by GraphQLClient."""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

import requests

from ..errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30
USER_AGENT = "gqlhttp/0.1"


@dataclass
class TransportResponse:
    status_code: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)


class Transport(Protocol):
    """One blocking JSON POST per call. Retries, TLS and pooling live here, not in the client."""

    def post_json(self, url: str, headers: Mapping[str, str], body: bytes) -> TransportResponse:
        ...

    def close(self) -> None:
        ...


class RequestsTransport:
    """Transport backed by a ``requests.Session``."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self.session = session or requests.Session()
        self.timeout = timeout
        self.session.headers.update({"User-Agent": USER_AGENT})

    def post_json(self, url: str, headers: Mapping[str, str], body: bytes) -> TransportResponse:
        try:
            response = self.session.post(url, headers=dict(headers), data=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e
        logger.debug(f"POST {url} -> {response.status_code}")
        return TransportResponse(
            status_code=response.status_code,
            body=response.content,
            headers=response.headers,
        )

    def close(self) -> None:
        self.session.close()
