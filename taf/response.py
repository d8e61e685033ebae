"""Validated response wrapper, one per call.

The wrapper is created by the client for a single response and handed to the
caller; the client keeps no reference to it.
"""
from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .status import HttpStatus, status_code
from .types import DecodeError, UnexpectedStatusError

T = TypeVar("T")


class ValidatedResponse:
    def __init__(self, raw: httpx.Response) -> None:
        self.raw = raw

    def __repr__(self) -> str:
        return f"<ValidatedResponse {self.method} {self.url} [{self.status}]>"

    @property
    def status(self) -> int:
        return self.raw.status_code

    @property
    def method(self) -> str:
        return self.raw.request.method

    @property
    def url(self) -> str:
        return str(self.raw.request.url)

    @property
    def headers(self) -> httpx.Headers:
        return self.raw.headers

    @property
    def text(self) -> str:
        return self.raw.text

    def json(self) -> Any:
        return self.raw.json()

    def expect_status(self, expected: HttpStatus | int) -> ValidatedResponse:
        """Return self if the status matches, else raise `UnexpectedStatusError`."""
        code = status_code(expected)
        if self.status != code:
            raise UnexpectedStatusError(
                code, self.status, method=self.method, url=self.url, body=self.text
            )
        return self

    def extract(self, model: type[T]) -> T:
        """Decode the body into one `model` instance."""
        return self._decode(TypeAdapter(model), model.__name__)

    def extract_list(self, model: type[T]) -> list[T]:
        """Decode the body as a JSON array of `model` instances."""
        return self._decode(TypeAdapter(list[model]), f"list[{model.__name__}]")

    def _decode(self, adapter: TypeAdapter, target: str) -> Any:
        try:
            data = self.raw.json()
        except ValueError as e:
            raise DecodeError(target, self.text, "body is not valid JSON") from e
        try:
            return adapter.validate_python(data)
        except ValidationError as e:
            reason = f"{e.error_count()} validation error(s)"
            raise DecodeError(target, self.text, reason) from e
