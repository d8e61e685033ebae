"""Generic CRUD endpoint for one resource kind.

A resource kind is plain configuration (name, DTO type, two path templates);
`ResourceEndpoint` turns it into the create/update/get_by_id/get_all surface.

Every operation comes in two flavours:
- `<op>_response(..., status)` sends the request, checks the status and
  returns the `ValidatedResponse`
- `<op>(...)` calls the former with the operation's default status and
  decodes the body into the DTO type (or a list of it)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from .client import ResourceClient
from .paths import placeholders
from .response import ValidatedResponse
from .status import HttpStatus
from .transport import HttpTransport

T = TypeVar("T", bound=BaseModel)

ResourceId = str | int


@dataclass(frozen=True)
class ResourceKind(Generic[T]):
    """Static description of a REST resource: `POST/GET {collection}`, `PUT/GET/DELETE {item}`."""

    name: str
    model: type[T]
    collection_path: str
    item_path: str

    def __post_init__(self) -> None:
        if placeholders(self.collection_path):
            raise ValueError(f"collection path must not have placeholders: {self.collection_path}")
        if len(placeholders(self.item_path)) != 1:
            raise ValueError(f"item path must have exactly one placeholder: {self.item_path}")

    @classmethod
    def plural(cls, name: str, model: type[T]) -> ResourceKind[T]:
        """Conventional `/{name}s` and `/{name}s/{name_id}` layout."""
        return cls(name, model, f"/{name}s", f"/{name}s/{{{name}_id}}")


class ResourceEndpoint(Generic[T]):
    def __init__(self, transport: HttpTransport, kind: ResourceKind[T]) -> None:
        self.kind = kind
        self.client = ResourceClient(transport)
        self.logger = transport.logger

    def __repr__(self) -> str:
        return f"<ResourceEndpoint {self.kind.name} {self.kind.collection_path}>"

    # ---- create ----

    def create(self, dto: T) -> T:
        return self.create_response(dto, HttpStatus.CREATED).extract(self.kind.model)

    def create_response(self, dto: T, status: HttpStatus | int) -> ValidatedResponse:
        self._log("create")
        return self.client.post(self.kind.collection_path, dto).expect_status(status)

    # ---- update ----

    def update(self, resource_id: ResourceId, dto: T) -> T:
        return self.update_response(dto, resource_id, HttpStatus.OK).extract(self.kind.model)

    def update_response(
        self, dto: T, resource_id: ResourceId, status: HttpStatus | int
    ) -> ValidatedResponse:
        rid = str(resource_id)
        self._log("update", rid)
        return self.client.put(self.kind.item_path, dto, rid).expect_status(status)

    # ---- read ----

    def get_by_id(self, resource_id: ResourceId) -> T:
        return self.get_by_id_response(resource_id, HttpStatus.OK).extract(self.kind.model)

    def get_by_id_response(
        self, resource_id: ResourceId, status: HttpStatus | int
    ) -> ValidatedResponse:
        rid = str(resource_id)
        self._log("get", rid)
        return self.client.get(self.kind.item_path, rid).expect_status(status)

    def get_all(self) -> list[T]:
        return self.get_all_response(HttpStatus.OK).extract_list(self.kind.model)

    def get_all_response(self, status: HttpStatus | int) -> ValidatedResponse:
        self._log("list")
        return self.client.get(self.kind.collection_path).expect_status(status)

    # ---- delete ----

    def delete(self, resource_id: ResourceId) -> None:
        self.delete_response(resource_id, HttpStatus.OK)

    def delete_response(
        self, resource_id: ResourceId, status: HttpStatus | int
    ) -> ValidatedResponse:
        rid = str(resource_id)
        self._log("delete", rid)
        return self.client.delete(self.kind.item_path, rid).expect_status(status)

    def _log(self, op: str, resource_id: str | None = None) -> None:
        extra = {"event": f"resource_{op}", "resource": self.kind.name}
        if resource_id is not None:
            extra["resource_id"] = resource_id
        self.logger.info(f"{self.kind.name}.{op}", extra=extra)
