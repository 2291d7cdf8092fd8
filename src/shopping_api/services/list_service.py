"""List service for shopping list business logic.

This service parses identifiers, applies partial-update rules and
delegates persistence to a ListStore (normally the caching decorator).
"""

import logging
from uuid import UUID

from shopping_api.entities import ShoppingListEntity
from shopping_api.exceptions import InvalidListIdError
from shopping_api.protocols import ListStore

logger = logging.getLogger(__name__)


def parse_list_id(raw_id: str) -> UUID:
    """Parse a path identifier into the store's id type.

    Raises:
        InvalidListIdError: If the value is not a UUID
    """
    try:
        return UUID(raw_id)
    except (ValueError, AttributeError, TypeError):
        raise InvalidListIdError(raw_id) from None


class ListService:
    """Core shopping list operations.

    This service depends on the ListStore PROTOCOL, not a concrete
    implementation, so the same code runs against PostgreSQL, the
    in-memory store, or a cached decorator around either.

    Example:
        ```python
        from shopping_api.repositories import CachedListRepository, InMemoryListRepository
        from shopping_api.cache import ListCache
        from shopping_api.services import ListService

        service = ListService.create(
            store=CachedListRepository(InMemoryListRepository(), ListCache()),
        )
        created = service.create_list("Groceries", ["milk"])
        service.push_item(str(created.id), "bread")
        ```
    """

    def __init__(self, store: ListStore) -> None:
        """Initialize the list service.

        Args:
            store: Shopping list storage backend (required).
        """
        self._store = store

    @classmethod
    def create(cls, store: ListStore) -> "ListService":
        """Factory method to create a ListService.

        Args:
            store: Shopping list storage backend (required).

        Returns:
            Configured ListService instance
        """
        return cls(store=store)

    def get_lists(self) -> list[ShoppingListEntity]:
        return self._store.get_all()

    def get_list(self, raw_id: str) -> ShoppingListEntity:
        return self._store.get_by_id(parse_list_id(raw_id))

    def create_list(self, name: str, items: list[str]) -> ShoppingListEntity:
        created = self._store.create(name, items)
        logger.info("Created shopping list %s", created.id)
        return created

    def replace_list(self, raw_id: str, name: str, items: list[str]) -> ShoppingListEntity:
        """Replace name and items of a list wholesale."""
        return self._store.update(parse_list_id(raw_id), name, items)

    def patch_list(
        self,
        raw_id: str,
        name: str | None = None,
        items: list[str] | None = None,
    ) -> ShoppingListEntity:
        """Merge the provided fields into a list.

        Business rules:
        1. A field that is None is left unchanged
        2. An empty name counts as "not provided"
        3. A provided items list replaces the stored items exactly

        Args:
            raw_id: List identifier from the request path
            name: New name, or None/"" to keep the current one
            items: New items, or None to keep the current ones

        Returns:
            The updated list
        """
        list_id = parse_list_id(raw_id)
        if name == "":
            name = None
        return self._store.partial_update(list_id, name, items)

    def push_item(self, raw_id: str, item: str) -> ShoppingListEntity:
        return self._store.push_item(parse_list_id(raw_id), item)

    def delete_list(self, raw_id: str) -> None:
        list_id = parse_list_id(raw_id)
        self._store.delete(list_id)
        logger.info("Deleted shopping list %s", list_id)

    def is_healthy(self) -> bool:
        """Check if the list store is reachable."""
        return self._store.health_check()

    @property
    def store(self) -> ListStore:
        """Get the underlying store."""
        return self._store
