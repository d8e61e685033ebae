from __future__ import annotations

from enum import Enum

__all__ = [
    "HttpStatus",
    "status_code",
]


class HttpStatus(int, Enum):
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    MOVED_PERMANENTLY = 301
    FOUND = 302
    NOT_MODIFIED = 304
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503

    @property
    def code(self) -> int:
        return int(self.value)


def status_code(status: HttpStatus | int) -> int:
    """Return the numeric code for an `HttpStatus` or a plain int.

    Raises:
        ValueError: if the code is outside the 100-599 range.
    """
    code = int(status)
    if not (100 <= code <= 599):
        raise ValueError(f"not an HTTP status code: {code}")
    return code
