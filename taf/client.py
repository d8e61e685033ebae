from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from .paths import resolve_path
from .response import ValidatedResponse
from .transport import HttpTransport


def to_json_body(body: Any) -> Any:
    """Serialize a request body: DTOs via pydantic, anything else passes through."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body


class ResourceClient:
    """Verb-level primitives shared by every resource endpoint.

    Each primitive resolves the path template, sends exactly one request and
    wraps the reply without looking at its status; status checks belong to
    the endpoint layer.
    """

    def __init__(self, transport: HttpTransport) -> None:
        self.transport = transport
        self.logger = transport.logger

    def get(self, template: str, *params: object) -> ValidatedResponse:
        return self._send("GET", template, params)

    def post(self, template: str, body: Any = None, *params: object) -> ValidatedResponse:
        return self._send("POST", template, params, body)

    def put(self, template: str, body: Any = None, *params: object) -> ValidatedResponse:
        return self._send("PUT", template, params, body)

    def delete(self, template: str, *params: object) -> ValidatedResponse:
        return self._send("DELETE", template, params)

    def _send(
        self, method: str, template: str, params: tuple[object, ...], body: Any = None
    ) -> ValidatedResponse:
        # Resolve first so a bad template never reaches the network
        path = resolve_path(template, params)
        self.logger.debug(
            "http.request",
            extra={"event": "http_request", "method": method, "path": path},
        )
        raw = self.transport.request(method, path, json=to_json_body(body))
        self.logger.debug(
            "http.response",
            extra={
                "event": "http_response",
                "method": method,
                "path": path,
                "status_code": raw.status_code,
            },
        )
        return ValidatedResponse(raw)
