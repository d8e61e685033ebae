"""Typed REST resource clients for API test automation.

The public surface: build a `TransportConfig`, wrap it in an `HttpTransport`,
then get a `ResourceEndpoint` per resource kind.
"""
from importlib.metadata import PackageNotFoundError, version

from .client import ResourceClient
from .config import TransportConfig
from .endpoint import ResourceEndpoint, ResourceKind
from .resources import COMMENTS, USERS, CommentDto, UserDto, comment_endpoint, user_endpoint
from .response import ValidatedResponse
from .status import HttpStatus
from .transport import HttpTransport
from .types import (
    ConfigError,
    DecodeError,
    PathSubstitutionError,
    TafError,
    TransportError,
    UnexpectedStatusError,
)

try:
    __version__ = version("placeholder-taf")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "COMMENTS",
    "USERS",
    "CommentDto",
    "ConfigError",
    "DecodeError",
    "HttpStatus",
    "HttpTransport",
    "PathSubstitutionError",
    "ResourceClient",
    "ResourceEndpoint",
    "ResourceKind",
    "TafError",
    "TransportConfig",
    "TransportError",
    "UnexpectedStatusError",
    "UserDto",
    "ValidatedResponse",
    "comment_endpoint",
    "user_endpoint",
]
