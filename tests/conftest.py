from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from mockapi.main import create_app
from taf import HttpTransport, TransportConfig, comment_endpoint, user_endpoint

MOCK_BASE = "http://api.test"


@pytest.fixture
def api() -> TestClient:
    """A fresh in-memory placeholder API per test."""
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def config() -> TransportConfig:
    return TransportConfig(base_url="http://testserver", headers={"X-Suite": "taf"})


@pytest.fixture
def transport(config: TransportConfig, api: TestClient) -> HttpTransport:
    return HttpTransport(config, client=api)


@pytest.fixture
def comments(transport):
    return comment_endpoint(transport)


@pytest.fixture
def users(transport):
    return user_endpoint(transport)


@pytest.fixture
def mock_transport() -> Callable[..., HttpTransport]:
    """Factory: HttpTransport whose requests are answered by `handler`."""
    opened: list[httpx.Client] = []

    def make(
        handler: Callable[[httpx.Request], httpx.Response],
        config: TransportConfig | None = None,
    ) -> HttpTransport:
        client = httpx.Client(transport=httpx.MockTransport(handler), base_url=MOCK_BASE)
        opened.append(client)
        return HttpTransport(config or TransportConfig(base_url=MOCK_BASE), client=client)

    yield make
    for c in opened:
        c.close()
