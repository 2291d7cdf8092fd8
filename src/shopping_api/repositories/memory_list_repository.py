"""In-memory implementation of ListStore.

Used by the `memory` store backend and by the test suite. A single lock
serializes writers, which makes `push_item` atomic just like the
PostgreSQL `array_append` update.
"""

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from uuid import UUID

from shopping_api.entities import ShoppingListEntity
from shopping_api.exceptions import ListNotFoundError


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryListRepository:
    """Dictionary-backed list repository (satisfies ListStore)."""

    def __init__(self) -> None:
        self._lists: dict[UUID, ShoppingListEntity] = {}
        self._lock = threading.Lock()

    def _require(self, list_id: UUID) -> ShoppingListEntity:
        try:
            return self._lists[list_id]
        except KeyError:
            raise ListNotFoundError(list_id) from None

    def get_by_id(self, list_id: UUID) -> ShoppingListEntity:
        with self._lock:
            return self._require(list_id)

    def get_all(self) -> list[ShoppingListEntity]:
        with self._lock:
            return sorted(self._lists.values(), key=lambda entry: entry.created_at)

    def create(self, name: str, items: list[str]) -> ShoppingListEntity:
        now = _now()
        entry = ShoppingListEntity(
            id=uuid.uuid4(),
            name=name,
            items=tuple(items),
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._lists[entry.id] = entry
        return entry

    def update(self, list_id: UUID, name: str, items: list[str]) -> ShoppingListEntity:
        with self._lock:
            current = self._require(list_id)
            updated = replace(current, name=name, items=tuple(items), updated_at=_now())
            self._lists[list_id] = updated
            return updated

    def partial_update(
        self,
        list_id: UUID,
        name: str | None,
        items: list[str] | None,
    ) -> ShoppingListEntity:
        with self._lock:
            current = self._require(list_id)
            updated = replace(
                current,
                name=current.name if name is None else name,
                items=current.items if items is None else tuple(items),
                updated_at=_now(),
            )
            self._lists[list_id] = updated
            return updated

    def push_item(self, list_id: UUID, item: str) -> ShoppingListEntity:
        with self._lock:
            current = self._require(list_id)
            updated = replace(current, items=current.items + (item,), updated_at=_now())
            self._lists[list_id] = updated
            return updated

    def delete(self, list_id: UUID) -> None:
        with self._lock:
            if self._lists.pop(list_id, None) is None:
                raise ListNotFoundError(list_id)

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._lists)
