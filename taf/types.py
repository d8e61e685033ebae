from __future__ import annotations

_EXCERPT_LEN = 200


def excerpt(text: str, limit: int = _EXCERPT_LEN) -> str:
    """Return `text` cut to `limit` characters, marking the cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + "...[truncated]"


class TafError(RuntimeError):
    """Base class for every error raised by the client layer."""


class ConfigError(TafError):
    """Raised when the transport configuration cannot be built (e.g., bad HTTP_TIMEOUT)."""


class TransportError(TafError):
    """Raised when the HTTP call itself fails (connect, timeout, protocol)."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class PathSubstitutionError(TafError):
    """Raised when a path template's placeholders don't match the values given.

    `empty` is set when the counts match but a value would leave a segment blank.
    """

    def __init__(self, template: str, expected: int, given: int, *, empty: bool = False) -> None:
        self.template = template
        self.expected = expected
        self.given = given
        self.empty = empty
        if empty:
            msg = f"path template {template!r} got an empty value for a placeholder"
        else:
            msg = f"path template {template!r} has {expected} placeholder(s), got {given} value(s)"
        super().__init__(msg)


class UnexpectedStatusError(TafError):
    """Raised when the response status differs from the expected one.

    `expected` and `actual` are plain ints so callers can compare directly.
    """

    def __init__(
        self, expected: int, actual: int, *, method: str = "", url: str = "", body: str = ""
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.method = method
        self.url = url
        self.body = body
        where = f" for {method} {url}" if method else ""
        detail = f": {excerpt(body)}" if body else ""
        super().__init__(f"expected status {expected} but got {actual}{where}{detail}")


class DecodeError(TafError):
    """Raised when a response body can't be decoded into the target DTO type."""

    def __init__(self, target: str, payload: str, reason: str = "") -> None:
        self.target = target
        self.excerpt = excerpt(payload)
        self.reason = reason
        msg = f"cannot decode response body as {target}: {self.excerpt!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class SmokeError(TafError):
    """Raised when the smoke run cannot proceed (e.g., health never ready)."""
