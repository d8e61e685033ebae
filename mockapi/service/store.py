from __future__ import annotations

import threading
from typing import Any

from taf.logging_conf import get_logger

logger = get_logger("mockapi.store")


class NotFound(KeyError):
    """Raised when a resource id is unknown within a collection."""

    def __init__(self, collection: str, item_id: int) -> None:
        self.collection = collection
        self.item_id = item_id
        super().__init__(f"{collection}/{item_id}")


class ResourceStore:
    """Thread-safe in-memory collections keyed by integer id.

    Ids are assigned per collection starting at 1 and never reused.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: dict[str, dict[int, dict[str, Any]]] = {}
        self._next_id: dict[str, int] = {}

    def create(self, collection: str, data: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            item_id = self._next_id.get(collection, 1)
            self._next_id[collection] = item_id + 1
            item = {**data, "id": item_id}
            self._items.setdefault(collection, {})[item_id] = item
        logger.info(
            "store.create",
            extra={"event": "store_create", "collection": collection, "item_id": item_id},
        )
        return dict(item)

    def get(self, collection: str, item_id: int) -> dict[str, Any]:
        with self._lock:
            item = self._items.get(collection, {}).get(item_id)
        if item is None:
            raise NotFound(collection, item_id)
        return dict(item)

    def list_all(self, collection: str) -> list[dict[str, Any]]:
        with self._lock:
            return [dict(it) for it in self._items.get(collection, {}).values()]

    def replace(self, collection: str, item_id: int, data: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            items = self._items.get(collection, {})
            if item_id not in items:
                raise NotFound(collection, item_id)
            item = {**data, "id": item_id}
            items[item_id] = item
        logger.info(
            "store.replace",
            extra={"event": "store_replace", "collection": collection, "item_id": item_id},
        )
        return dict(item)

    def delete(self, collection: str, item_id: int) -> None:
        with self._lock:
            items = self._items.get(collection, {})
            if items.pop(item_id, None) is None:
                raise NotFound(collection, item_id)
        logger.info(
            "store.delete",
            extra={"event": "store_delete", "collection": collection, "item_id": item_id},
        )
