from __future__ import annotations

from pydantic import BaseModel


class UserIn(BaseModel):
    """Body accepted when creating or replacing a user."""
    name: str
    email: str


class User(UserIn):
    """A stored user."""
    id: int


class CommentIn(BaseModel):
    """Body accepted when creating or replacing a comment."""
    content: str


class Comment(CommentIn):
    """A stored comment."""
    id: int
