"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state

Route guards:
    - require_auth: any valid, unexpired session (401 otherwise)
    - require_admin: require_auth plus the admin role (403 otherwise)
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Header, Request

from shopping_api.cache import ListCache
from shopping_api.config import settings
from shopping_api.database import create_db_engine, init_schema
from shopping_api.entities import Role, SessionEntity
from shopping_api.handlers import AuthHandler, ListHandler
from shopping_api.repositories import (
    CachedListRepository,
    InMemoryListRepository,
    InMemorySessionRepository,
    PostgresListRepository,
    PostgresSessionRepository,
    StaticUserRepository,
)
from shopping_api.services import AuthService, ListService

logger = logging.getLogger(__name__)


def get_list_handler(request: Request) -> ListHandler:
    """Dependency injection for ListHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The ListHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "list_handler", None)
    if handler is None:
        raise RuntimeError("ListHandler not initialized. Check lifespan setup.")
    return handler


def get_auth_handler(request: Request) -> AuthHandler:
    """Dependency injection for AuthHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "auth_handler", None)
    if handler is None:
        raise RuntimeError("AuthHandler not initialized. Check lifespan setup.")
    return handler


ListHandlerDep = Annotated[ListHandler, Depends(get_list_handler)]
AuthHandlerDep = Annotated[AuthHandler, Depends(get_auth_handler)]


def require_auth(
    auth_handler: AuthHandlerDep,
    authorization: Annotated[str | None, Header()] = None,
) -> SessionEntity:
    """Require a valid bearer session on the request."""
    return auth_handler.authenticate(authorization)


def require_admin(
    auth_handler: AuthHandlerDep,
    session: Annotated[SessionEntity, Depends(require_auth)],
) -> SessionEntity:
    """Require a valid bearer session whose user holds the admin role."""
    return auth_handler.authorize(session, Role.ADMIN)


SessionDep = Annotated[SessionEntity, Depends(require_auth)]
AdminSessionDep = Annotated[SessionEntity, Depends(require_admin)]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repositories (data access) - PostgreSQL or in-memory per settings
    2. Cache - shared LRU cache wrapped around the list repository
    3. Services (business logic)
    4. Handlers (HTTP endpoints) - app.state.list_handler / auth_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Disposes the database engine and removes everything from app.state
    """
    engine = None
    if settings.store_backend == "memory":
        list_store = InMemoryListRepository()
        session_store = InMemorySessionRepository()
    else:
        engine = create_db_engine(settings)
        init_schema(engine)
        list_store = PostgresListRepository(engine)
        session_store = PostgresSessionRepository(engine)

    list_cache = ListCache(capacity=settings.list_cache_capacity)
    cached_store = CachedListRepository(list_store, list_cache)

    list_service = ListService.create(store=cached_store)
    auth_service = AuthService.create(
        session_store=session_store,
        user_store=StaticUserRepository.create(),
    )

    # Store in app.state (FastAPI pattern)
    app.state.session_store = session_store
    app.state.list_service = list_service
    app.state.auth_service = auth_service
    app.state.list_handler = ListHandler(list_service=list_service)
    app.state.auth_handler = AuthHandler(auth_service=auth_service)

    logger.info(
        "Shopping list API started (env=%s, store=%s, cache capacity=%d)",
        settings.app_env,
        settings.store_backend,
        list_cache.capacity,
    )

    yield

    # Cleanup - remove from app.state
    del app.state.auth_handler
    del app.state.list_handler
    del app.state.auth_service
    del app.state.list_service
    del app.state.session_store
    if engine is not None:
        engine.dispose()
    logger.info("Shopping list API shut down")
