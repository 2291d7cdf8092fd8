"""In-memory implementation of SessionStore."""

import threading
from datetime import datetime, timezone

from shopping_api.entities import SessionEntity


class InMemorySessionRepository:
    """Dictionary-backed session repository (satisfies SessionStore).

    Expired sessions are kept until revoked, matching the PostgreSQL
    repository; validity is decided by AuthService.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, SessionEntity] = {}
        self._lock = threading.Lock()

    def add(self, token: str, username: str, expires_at: datetime) -> SessionEntity:
        now = datetime.now(timezone.utc)
        session = SessionEntity(
            token=token,
            username=username,
            expires_at=expires_at,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._sessions[token] = session
        return session

    def get_by_token(self, token: str) -> SessionEntity | None:
        with self._lock:
            return self._sessions.get(token)

    def delete_by_token(self, token: str) -> bool:
        with self._lock:
            return self._sessions.pop(token, None) is not None
