"""PostgreSQL implementation of ListStore.

Statements are built with SQLAlchemy Core against the `shopping_lists`
table. Appending an item is a single `array_append` UPDATE so concurrent
pushes to the same list never lose writes.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import Engine, Text, cast, delete, func, insert, select, text, update
from sqlalchemy.exc import SQLAlchemyError

from shopping_api.database import shopping_lists
from shopping_api.entities import ShoppingListEntity
from shopping_api.exceptions import ListNotFoundError, StoreError

logger = logging.getLogger(__name__)


def _to_entity(row: Any) -> ShoppingListEntity:
    return ShoppingListEntity(
        id=row["id"],
        name=row["name"],
        items=tuple(row["items"] or ()),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class PostgresListRepository:
    """PostgreSQL list repository.

    This class satisfies the ListStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize the repository.

        Args:
            engine: Pooled SQLAlchemy engine (see database.create_db_engine)
        """
        self._engine = engine

    def _fetch_one(self, stmt: Any, action: str, list_id: UUID | None = None) -> Any:
        try:
            with self._engine.begin() as conn:
                return conn.execute(stmt).mappings().first()
        except SQLAlchemyError as e:
            logger.exception("Failed to %s shopping list %s", action, list_id or "")
            raise StoreError(f"failed to {action} shopping list") from e

    def get_by_id(self, list_id: UUID) -> ShoppingListEntity:
        row = self._fetch_one(
            select(shopping_lists).where(shopping_lists.c.id == list_id),
            "get",
            list_id,
        )
        if row is None:
            raise ListNotFoundError(list_id)
        return _to_entity(row)

    def get_all(self) -> list[ShoppingListEntity]:
        stmt = select(shopping_lists).order_by(shopping_lists.c.created_at)
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            logger.exception("Failed to get all shopping lists")
            raise StoreError("failed to get all shopping lists") from e
        return [_to_entity(row) for row in rows]

    def create(self, name: str, items: list[str]) -> ShoppingListEntity:
        row = self._fetch_one(
            insert(shopping_lists)
            .values(name=name, items=list(items))
            .returning(*shopping_lists.c),
            "create",
        )
        return _to_entity(row)

    def update(self, list_id: UUID, name: str, items: list[str]) -> ShoppingListEntity:
        row = self._fetch_one(
            update(shopping_lists)
            .where(shopping_lists.c.id == list_id)
            .values(name=name, items=list(items), updated_at=func.now())
            .returning(*shopping_lists.c),
            "update",
            list_id,
        )
        if row is None:
            raise ListNotFoundError(list_id)
        return _to_entity(row)

    def partial_update(
        self,
        list_id: UUID,
        name: str | None,
        items: list[str] | None,
    ) -> ShoppingListEntity:
        values: dict[str, Any] = {"updated_at": func.now()}
        if name is not None:
            values["name"] = name
        if items is not None:
            values["items"] = list(items)

        row = self._fetch_one(
            update(shopping_lists)
            .where(shopping_lists.c.id == list_id)
            .values(**values)
            .returning(*shopping_lists.c),
            "patch",
            list_id,
        )
        if row is None:
            raise ListNotFoundError(list_id)
        return _to_entity(row)

    def push_item(self, list_id: UUID, item: str) -> ShoppingListEntity:
        row = self._fetch_one(
            update(shopping_lists)
            .where(shopping_lists.c.id == list_id)
            .values(
                items=func.array_append(shopping_lists.c.items, cast(item, Text)),
                updated_at=func.now(),
            )
            .returning(*shopping_lists.c),
            "push item to",
            list_id,
        )
        if row is None:
            raise ListNotFoundError(list_id)
        return _to_entity(row)

    def delete(self, list_id: UUID) -> None:
        row = self._fetch_one(
            delete(shopping_lists)
            .where(shopping_lists.c.id == list_id)
            .returning(shopping_lists.c.id),
            "delete",
            list_id,
        )
        if row is None:
            raise ListNotFoundError(list_id)

    def health_check(self) -> bool:
        """Check if PostgreSQL is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            logger.warning("Database health check failed", exc_info=True)
            return False
