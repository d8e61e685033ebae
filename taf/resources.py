"""DTOs and resource kinds for the placeholder API (users, comments)."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from .endpoint import ResourceEndpoint, ResourceKind
from .transport import HttpTransport


class ResourceDto(BaseModel):
    """Common base: string ids, unknown wire fields ignored."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v: object) -> object:
        # Servers commonly send integer ids; clients always see strings
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class UserDto(ResourceDto):
    """A user as exchanged over the wire."""
    name: str
    email: str


class CommentDto(ResourceDto):
    """A comment as exchanged over the wire."""
    content: str


USERS: ResourceKind[UserDto] = ResourceKind.plural("user", UserDto)
COMMENTS: ResourceKind[CommentDto] = ResourceKind.plural("comment", CommentDto)

KINDS: dict[str, ResourceKind] = {k.name: k for k in (USERS, COMMENTS)}


def user_endpoint(transport: HttpTransport) -> ResourceEndpoint[UserDto]:
    return ResourceEndpoint(transport, USERS)


def comment_endpoint(transport: HttpTransport) -> ResourceEndpoint[CommentDto]:
    return ResourceEndpoint(transport, COMMENTS)
