"""Transport configuration: target, headers, auth and the logger handle.

A config is built once per test context and shared by reference with every
client built on it. It is frozen so it can be shared across threads.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .logging_conf import get_logger
from .types import ConfigError

DEFAULT_BASE_URL = "http://127.0.0.1:8000"
DEFAULT_TIMEOUT_S = 10.0


def get_timeout_from_env() -> float:
    """Return HTTP_TIMEOUT from environment, defaulting to 10 seconds."""
    raw = os.getenv("HTTP_TIMEOUT")
    if raw is None or raw == "":
        return DEFAULT_TIMEOUT_S
    try:
        val = float(raw)
    except ValueError as e:
        raise ConfigError("HTTP_TIMEOUT must be a number of seconds") from e
    if val <= 0:
        raise ConfigError("HTTP_TIMEOUT must be positive")
    return val


@dataclass(frozen=True)
class TransportConfig:
    """Connection target and request defaults for one API under test."""

    base_url: str = DEFAULT_BASE_URL
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)
    token: str | None = None
    timeout_s: float = DEFAULT_TIMEOUT_S
    logger: logging.Logger = field(default_factory=lambda: get_logger("taf"), compare=False)

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigError("base_url must be a non-empty string")
        if self.timeout_s <= 0:
            raise ConfigError("timeout_s must be positive")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        # Freeze the caller's dict so later edits can't leak into requests
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def from_env(
        cls,
        *,
        headers: Mapping[str, str] | None = None,
        logger: logging.Logger | None = None,
    ) -> TransportConfig:
        """Build a config from BASE_URL, API_TOKEN and HTTP_TIMEOUT."""
        return cls(
            base_url=os.getenv("BASE_URL", DEFAULT_BASE_URL),
            headers=headers or {},
            token=os.getenv("API_TOKEN") or None,
            timeout_s=get_timeout_from_env(),
            logger=logger or get_logger("taf"),
        )

    def request_headers(self) -> dict[str, str]:
        """Headers sent with every request: JSON accept, user headers, then auth."""
        out = {"Accept": "application/json"}
        out.update(self.headers)
        if self.token:
            out["Authorization"] = f"Bearer {self.token}"
        return out
