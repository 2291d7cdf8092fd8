"""Repository layer for data access.

This layer hides PostgreSQL (and the in-memory variants) behind the
protocol-based interfaces in `shopping_api.protocols`. Any class
implementing the required methods satisfies the protocol.
"""

from shopping_api.protocols import ListStore, SessionStore, UserStore

from .cached_list_repository import CachedListRepository
from .memory_list_repository import InMemoryListRepository
from .memory_session_repository import InMemorySessionRepository
from .postgres_list_repository import PostgresListRepository
from .postgres_session_repository import PostgresSessionRepository
from .user_repository import DEFAULT_USERS, StaticUserRepository

__all__ = [
    "ListStore",
    "SessionStore",
    "UserStore",
    "CachedListRepository",
    "InMemoryListRepository",
    "InMemorySessionRepository",
    "PostgresListRepository",
    "PostgresSessionRepository",
    "StaticUserRepository",
    "DEFAULT_USERS",
]
