"""Session domain entity."""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class SessionEntity:
    """A server-issued bearer credential tied to a username and expiry.

    Attributes:
        token: Opaque bearer token
        username: Owner of the session
        expires_at: Instant after which the session is no longer valid
        created_at: When the session was issued
        updated_at: Last modification time (sessions are never mutated)
    """

    token: str
    username: str
    expires_at: datetime
    created_at: datetime
    updated_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the session has passed its expiry."""
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at
