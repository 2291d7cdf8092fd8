"""Session storage protocol."""

from datetime import datetime
from typing import Protocol, runtime_checkable

from shopping_api.entities import SessionEntity


@runtime_checkable
class SessionStore(Protocol):
    """Protocol for session storage backends.

    Example:
        ```python
        store: SessionStore = PostgresSessionRepository(engine)
        store: SessionStore = InMemorySessionRepository()
        ```
    """

    def add(self, token: str, username: str, expires_at: datetime) -> SessionEntity:
        """Persist a new session.

        Args:
            token: Opaque bearer token generated by the caller
            username: Owner of the session
            expires_at: Expiry instant (timezone-aware)

        Returns:
            The stored session
        """
        ...

    def get_by_token(self, token: str) -> SessionEntity | None:
        """Look up a session by its token.

        Returns:
            The session, or None when no session has this token.
            Expired sessions are returned as-is; callers decide validity.
        """
        ...

    def delete_by_token(self, token: str) -> bool:
        """Revoke a session.

        Returns:
            True if a session was deleted, False otherwise
        """
        ...
