"""PostgreSQL engine and table definitions.

Tables are declared with SQLAlchemy Core; repositories build statements
against them directly. `init_schema` creates missing tables and is safe
to call on every startup.
"""

import logging
import uuid

from sqlalchemy import (
    Column,
    DateTime,
    Engine,
    MetaData,
    Table,
    Text,
    create_engine,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.exc import SQLAlchemyError

from shopping_api.config import Settings, settings
from shopping_api.exceptions import StoreError

logger = logging.getLogger(__name__)

metadata = MetaData()

shopping_lists = Table(
    "shopping_lists",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, default=uuid.uuid4),
    Column("name", Text, nullable=False),
    Column("items", ARRAY(Text), nullable=False, server_default=text("'{}'")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

sessions = Table(
    "sessions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, default=uuid.uuid4),
    Column("token", Text, nullable=False, unique=True),
    Column("username", Text, nullable=False),
    Column("expires_at", DateTime(timezone=True), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)


def create_db_engine(config: Settings | None = None) -> Engine:
    """Create a pooled engine and verify the database is reachable.

    The pool holds at most `db_pool_size` connections with no overflow;
    callers beyond that block for up to `db_pool_timeout_seconds`. Every
    statement runs under a server-side `statement_timeout`.

    Args:
        config: Settings to use. Defaults to the global settings.

    Returns:
        A connected SQLAlchemy engine

    Raises:
        StoreError: If the database cannot be reached
    """
    config = config or settings
    timeout_ms = int(config.store_timeout_seconds * 1000)

    engine = create_engine(
        config.sqlalchemy_url,
        pool_size=config.db_pool_size,
        max_overflow=0,
        pool_timeout=config.db_pool_timeout_seconds,
        pool_recycle=config.db_pool_idle_seconds,
        pool_pre_ping=True,
        connect_args={
            "options": f"-c statement_timeout={timeout_ms}",
            "connect_timeout": max(1, int(config.store_timeout_seconds)),
        },
        echo=config.is_development and config.effective_log_level == "DEBUG",
    )

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.exception("Cannot connect to the database")
        engine.dispose()
        raise StoreError("database connection failed") from e

    logger.info("Connected to the database (pool size %d)", config.db_pool_size)
    return engine


def init_schema(engine: Engine) -> None:
    """Create the application tables if they do not exist."""
    try:
        metadata.create_all(engine)
    except SQLAlchemyError as e:
        logger.exception("Failed to create database schema")
        raise StoreError("schema initialization failed") from e
