"""Shared fixtures: a recording fake transport."""

from typing import List, Mapping, Optional, Tuple

import pytest

from gqlhttp.client import GraphQLClient, TransportResponse


class FakeTransport:
    """Returns a canned response and records every POST."""

    def __init__(self, status_code: int = 200, body: bytes = b"", headers: Optional[Mapping[str, str]] = None):
        self.response = TransportResponse(status_code=status_code, body=body, headers=dict(headers or {}))
        self.calls: List[Tuple[str, dict, bytes]] = []
        self.closed = False

    def post_json(self, url, headers, body):
        self.calls.append((url, dict(headers), body))
        return self.response

    def close(self):
        self.closed = True


ENDPOINT = "https://example.com/graphql"


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return GraphQLClient(ENDPOINT, authorization="bearer token", transport=transport)
