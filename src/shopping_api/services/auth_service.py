"""Authentication and authorization service.

Issues sessions on login, resolves bearer tokens on every protected
request and checks the caller's role. Token lookups are never cached so
that logout and new logins are visible immediately.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone

from shopping_api.config import settings
from shopping_api.entities import Role, SessionEntity, UserEntity
from shopping_api.exceptions import (
    ForbiddenError,
    InvalidCredentialsError,
    StoreError,
    UnauthorizedError,
)
from shopping_api.protocols import SessionStore, UserStore

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from an `Authorization: Bearer <token>` header.

    Raises:
        UnauthorizedError: If the header is missing, lacks the prefix, or
            carries an empty token
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("missing bearer token")
    token = authorization[len(BEARER_PREFIX) :].strip()
    if not token:
        raise UnauthorizedError("missing bearer token")
    return token


class AuthService:
    """Session lifecycle and role checks.

    Example:
        ```python
        auth = AuthService.create(
            session_store=InMemorySessionRepository(),
            user_store=StaticUserRepository.create(),
        )
        session = auth.login("admin", "password")
        auth.authorize(auth.authenticate(f"Bearer {session.token}"), Role.ADMIN)
        ```
    """

    def __init__(
        self,
        session_store: SessionStore,
        user_store: UserStore,
        session_ttl: timedelta | None = None,
    ) -> None:
        """Initialize the auth service.

        Args:
            session_store: Session persistence backend (required).
            user_store: User directory (required).
            session_ttl: Lifetime of new sessions. Defaults to settings.
        """
        self._sessions = session_store
        self._users = user_store
        self._session_ttl = session_ttl or timedelta(days=settings.session_ttl_days)

    @classmethod
    def create(
        cls,
        session_store: SessionStore,
        user_store: UserStore,
        session_ttl: timedelta | None = None,
    ) -> "AuthService":
        """Factory method to create AuthService with defaults."""
        return cls(
            session_store=session_store,
            user_store=user_store,
            session_ttl=session_ttl,
        )

    def login(self, username: str, password: str) -> SessionEntity:
        """Check credentials and issue a new session.

        The same error is raised for an unknown user and a wrong password.

        Raises:
            InvalidCredentialsError: If the credentials do not match
            StoreError: If the session could not be persisted
        """
        user = self._users.get(username)
        if user is None or not secrets.compare_digest(
            user.password.encode("utf-8", "surrogatepass"),
            password.encode("utf-8", "surrogatepass"),
        ):
            logger.info("Rejected login attempt for %r", username)
            raise InvalidCredentialsError("invalid credentials")

        token = secrets.token_urlsafe(32)
        expires_at = datetime.now(timezone.utc) + self._session_ttl
        session = self._sessions.add(token, user.username, expires_at)
        logger.info("Issued session for %s (expires %s)", user.username, expires_at.isoformat())
        return session

    def authenticate(self, authorization: str | None) -> SessionEntity:
        """Resolve the session for an Authorization header value.

        Store failures are reported as UnauthorizedError: requests fail
        closed when sessions cannot be verified.

        Raises:
            UnauthorizedError: If no valid, unexpired session matches
        """
        token = extract_bearer_token(authorization)

        try:
            session = self._sessions.get_by_token(token)
        except StoreError:
            logger.warning("Session lookup failed; rejecting request", exc_info=True)
            raise UnauthorizedError("session lookup failed") from None

        if session is None:
            logger.debug("No session for presented token")
            raise UnauthorizedError("unknown token")
        if session.is_expired():
            logger.debug("Session for %s expired at %s", session.username, session.expires_at)
            raise UnauthorizedError("session expired")
        return session

    def authorize(self, session: SessionEntity, required: Role) -> UserEntity:
        """Check that the session's user holds a role permitting `required`.

        Raises:
            ForbiddenError: If the user is unknown or lacks the role
        """
        user = self._users.get(session.username)
        if user is None or not user.role.permits(required):
            logger.warning(
                "User %s denied access requiring role %s", session.username, required.value
            )
            raise ForbiddenError("forbidden")
        return user

    def logout(self, token: str) -> bool:
        """Revoke a session.

        Returns:
            True if a session was revoked
        """
        return self._sessions.delete_by_token(token)
