"""Caching decorator for any ListStore.

Single-list reads go through the ListCache; every write path evicts the
affected id before returning, whether the write succeeded or not. Handlers
never touch the cache themselves.
"""

from uuid import UUID

from shopping_api.cache import ListCache
from shopping_api.entities import ShoppingListEntity
from shopping_api.protocols import ListStore


class CachedListRepository:
    """ListStore decorator adding a read-through LRU cache.

    This class itself satisfies the ListStore protocol, so services can
    use it in place of the store it wraps.

    Example:
        ```python
        store = CachedListRepository(PostgresListRepository(engine), ListCache())
        store.get_by_id(list_id)   # store hit, cached
        store.get_by_id(list_id)   # served from cache
        store.update(list_id, "Groceries", ["milk"])  # evicts list_id
        ```
    """

    def __init__(self, store: ListStore, cache: ListCache) -> None:
        """Initialize the decorator.

        Args:
            store: The underlying store (required).
            cache: Cache shared by all request workers (required).
        """
        self._store = store
        self._cache = cache

    def get_by_id(self, list_id: UUID) -> ShoppingListEntity:
        return self._cache.get_or_load(list_id, self._store.get_by_id)

    def get_all(self) -> list[ShoppingListEntity]:
        return self._store.get_all()

    def create(self, name: str, items: list[str]) -> ShoppingListEntity:
        return self._store.create(name, items)

    def update(self, list_id: UUID, name: str, items: list[str]) -> ShoppingListEntity:
        try:
            return self._store.update(list_id, name, items)
        finally:
            self._cache.invalidate(list_id)

    def partial_update(
        self,
        list_id: UUID,
        name: str | None,
        items: list[str] | None,
    ) -> ShoppingListEntity:
        try:
            return self._store.partial_update(list_id, name, items)
        finally:
            self._cache.invalidate(list_id)

    def push_item(self, list_id: UUID, item: str) -> ShoppingListEntity:
        try:
            return self._store.push_item(list_id, item)
        finally:
            self._cache.invalidate(list_id)

    def delete(self, list_id: UUID) -> None:
        try:
            self._store.delete(list_id)
        finally:
            self._cache.invalidate(list_id)

    def health_check(self) -> bool:
        return self._store.health_check()

    @property
    def cache(self) -> ListCache:
        """Get the underlying cache."""
        return self._cache

    @property
    def store(self) -> ListStore:
        """Get the wrapped, uncached store."""
        return self._store
