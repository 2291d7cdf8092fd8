"""Shopping List API - session-guarded CRUD over shopping lists.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (ListStore, SessionStore, UserStore)
    - repositories: Data access implementations (PostgreSQL, in-memory, cached)
    - services: Business logic (ListService, AuthService)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from shopping_api.cache import ListCache
    from shopping_api.repositories import CachedListRepository, InMemoryListRepository
    from shopping_api.services import ListService

    service = ListService.create(
        store=CachedListRepository(InMemoryListRepository(), ListCache()),
    )
    ```

For HTTP API:
    ```python
    from shopping_api.api.app import app
    ```
"""

from shopping_api.cache import ListCache
from shopping_api.config import get_settings, settings
from shopping_api.dto import CreateListRequest, PatchListRequest, ShoppingListResponse
from shopping_api.entities import Role, SessionEntity, ShoppingListEntity, UserEntity
from shopping_api.handlers import AuthHandler, ListHandler
from shopping_api.protocols import ListStore, SessionStore, UserStore
from shopping_api.repositories import (
    CachedListRepository,
    InMemoryListRepository,
    InMemorySessionRepository,
    PostgresListRepository,
    PostgresSessionRepository,
    StaticUserRepository,
)
from shopping_api.services import AuthService, ListService

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "ListStore",
    "SessionStore",
    "UserStore",
    # Services (business logic)
    "ListService",
    "AuthService",
    # Handlers (HTTP)
    "ListHandler",
    "AuthHandler",
    # Repositories (data access)
    "CachedListRepository",
    "InMemoryListRepository",
    "InMemorySessionRepository",
    "PostgresListRepository",
    "PostgresSessionRepository",
    "StaticUserRepository",
    # Cache
    "ListCache",
    # Entities (domain models)
    "Role",
    "SessionEntity",
    "ShoppingListEntity",
    "UserEntity",
    # DTOs (API contracts)
    "CreateListRequest",
    "PatchListRequest",
    "ShoppingListResponse",
]
