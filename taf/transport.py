"""Synchronous HTTP transport over httpx.

- One `request()` call issues exactly one HTTP request; nothing is retried
- httpx request failures (connect, timeout, redirects, body decoding) are re-raised as `TransportError`
- An injected client (e.g., FastAPI's TestClient) is used as-is and never closed here
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import TransportConfig
from .types import TransportError


class HttpTransport:
    def __init__(self, config: TransportConfig, client: httpx.Client | None = None) -> None:
        self.config = config
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout_s),
        )

    @property
    def logger(self) -> logging.Logger:
        return self.config.logger

    def request(self, method: str, path: str, *, json: Any = None) -> httpx.Response:
        """Send one request for `path` relative to the client's base URL."""
        kwargs: dict[str, Any] = {"headers": self.config.request_headers()}
        if json is not None:
            kwargs["json"] = json
        try:
            return self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(method, path, f"{type(e).__name__}: {e}") from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
