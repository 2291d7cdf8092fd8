"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (PostgreSQL → in-memory, etc.)
- Unit testing with stub implementations
- Decorating a store (e.g. with a cache) without changing callers

Usage:
    ```python
    from shopping_api.protocols import ListStore

    store: ListStore = PostgresListRepository(engine)
    store: ListStore = CachedListRepository(store, ListCache())
    ```
"""

from .list_store import ListStore
from .session_store import SessionStore
from .user_store import UserStore

__all__ = [
    "ListStore",
    "SessionStore",
    "UserStore",
]
