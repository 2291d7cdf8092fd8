"""Shopping list storage protocol.

Defines the interface for any backend that persists shopping lists.

Implementations include:
- PostgreSQL via SQLAlchemy Core (default)
- In-memory dictionary (tests, local development)
- CachedListRepository, a read-through/invalidate-on-write decorator
  around either of the above
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from shopping_api.entities import ShoppingListEntity


@runtime_checkable
class ListStore(Protocol):
    """Protocol for shopping list storage backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed. Lookups by id raise ListNotFoundError
    when the id is unknown; backend failures raise StoreError.
    """

    def get_by_id(self, list_id: UUID) -> ShoppingListEntity:
        """Fetch a single list.

        Raises:
            ListNotFoundError: If no list has this id
        """
        ...

    def get_all(self) -> list[ShoppingListEntity]:
        """Fetch every stored list."""
        ...

    def create(self, name: str, items: list[str]) -> ShoppingListEntity:
        """Insert a new list with a store-assigned id and timestamps."""
        ...

    def update(self, list_id: UUID, name: str, items: list[str]) -> ShoppingListEntity:
        """Replace name and items of an existing list.

        Raises:
            ListNotFoundError: If no list has this id
        """
        ...

    def partial_update(
        self,
        list_id: UUID,
        name: str | None,
        items: list[str] | None,
    ) -> ShoppingListEntity:
        """Update only the fields that are not None.

        Raises:
            ListNotFoundError: If no list has this id
        """
        ...

    def push_item(self, list_id: UUID, item: str) -> ShoppingListEntity:
        """Atomically append one item to the end of a list.

        Raises:
            ListNotFoundError: If no list has this id
        """
        ...

    def delete(self, list_id: UUID) -> None:
        """Remove a list.

        Raises:
            ListNotFoundError: If no list has this id
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
