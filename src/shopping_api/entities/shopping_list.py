"""Shopping list domain entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class ShoppingListEntity:
    """Domain entity for a stored shopping list.

    Instances are immutable snapshots, so the same object can be handed
    out of the response cache to many concurrent readers.

    Attributes:
        id: Store-assigned identifier
        name: Display name of the list
        items: Ordered item names
        created_at: When the list was created
        updated_at: When the list was last modified
    """

    id: UUID
    name: str
    items: tuple[str, ...]
    created_at: datetime
    updated_at: datetime
