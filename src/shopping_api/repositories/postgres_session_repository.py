"""PostgreSQL implementation of SessionStore."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import Engine, delete, insert, select
from sqlalchemy.exc import SQLAlchemyError

from shopping_api.database import sessions
from shopping_api.entities import SessionEntity
from shopping_api.exceptions import StoreError

logger = logging.getLogger(__name__)


def _to_entity(row: Any) -> SessionEntity:
    return SessionEntity(
        token=row["token"],
        username=row["username"],
        expires_at=row["expires_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class PostgresSessionRepository:
    """PostgreSQL session repository (satisfies SessionStore)."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, token: str, username: str, expires_at: datetime) -> SessionEntity:
        stmt = (
            insert(sessions)
            .values(token=token, username=username, expires_at=expires_at)
            .returning(*sessions.c)
        )
        try:
            with self._engine.begin() as conn:
                row = conn.execute(stmt).mappings().one()
        except SQLAlchemyError as e:
            logger.exception("Failed to add session for user %s", username)
            raise StoreError("failed to add session") from e
        return _to_entity(row)

    def get_by_token(self, token: str) -> SessionEntity | None:
        stmt = select(sessions).where(sessions.c.token == token)
        try:
            with self._engine.connect() as conn:
                row = conn.execute(stmt).mappings().first()
        except SQLAlchemyError as e:
            logger.debug("Get session by token failed: %s", e)
            raise StoreError("failed to get session") from e
        return _to_entity(row) if row is not None else None

    def delete_by_token(self, token: str) -> bool:
        stmt = delete(sessions).where(sessions.c.token == token)
        try:
            with self._engine.begin() as conn:
                result = conn.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("Failed to delete session")
            raise StoreError("failed to delete session") from e
        return result.rowcount > 0
