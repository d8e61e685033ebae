# No `from __future__ import annotations` here: FastAPI must see the real
# body/response types of the handlers built inside `resource_router`.
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from taf.logging_conf import get_logger

from ..service.store import NotFound, ResourceStore
from .models import Comment, CommentIn, User, UserIn

logger = get_logger("mockapi.api")


def _store(request: Request) -> ResourceStore:
    return request.app.state.store


def _not_found(e: NotFound) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error_code": "not_found",
            "error_message": f"{e.collection} {e.item_id} does not exist",
        },
    )


def resource_router(name: str, body_model: type[BaseModel], out_model: type[BaseModel]) -> APIRouter:
    """Build the CRUD routes for `/{name}s` backed by the app's store."""
    collection = f"{name}s"
    router = APIRouter(prefix=f"/{collection}", tags=[collection])

    @router.post(
        "",
        response_model=out_model,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create a {name}",
    )
    def create(body: body_model, request: Request):
        return _store(request).create(collection, body.model_dump())

    @router.get("", response_model=list[out_model], summary=f"List {collection}")
    def list_all(request: Request):
        return _store(request).list_all(collection)

    @router.get("/{item_id}", response_model=out_model, summary=f"Get a {name} by id")
    def get_one(item_id: int, request: Request):
        try:
            return _store(request).get(collection, item_id)
        except NotFound as e:
            raise _not_found(e) from e

    @router.put("/{item_id}", response_model=out_model, summary=f"Replace a {name}")
    def replace(item_id: int, body: body_model, request: Request):
        try:
            return _store(request).replace(collection, item_id, body.model_dump())
        except NotFound as e:
            raise _not_found(e) from e

    @router.delete("/{item_id}", summary=f"Delete a {name}")
    def delete(item_id: int, request: Request) -> dict:
        try:
            _store(request).delete(collection, item_id)
        except NotFound as e:
            raise _not_found(e) from e
        return {}

    return router


router = APIRouter()
router.include_router(resource_router("user", UserIn, User))
router.include_router(resource_router("comment", CommentIn, Comment))
