"""HTTP handlers for login, logout and route guards."""

from fastapi import HTTPException, Response, status

from shopping_api.dto import LoginRequest, TokenResponse
from shopping_api.entities import Role, SessionEntity
from shopping_api.exceptions import (
    ForbiddenError,
    InvalidCredentialsError,
    ShoppingApiError,
    UnauthorizedError,
)
from shopping_api.handlers.list_handler import to_http_error
from shopping_api.services import AuthService

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


class AuthHandler:
    """HTTP handlers for authentication.

    Besides the login/logout endpoints this handler backs the
    `require_auth` and `require_admin` dependencies, turning
    UnauthorizedError into 401 and ForbiddenError into 403.
    """

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize the auth handler.

        Args:
            auth_service: The auth service for business logic (required).
        """
        self._auth = auth_service

    def login(self, request: LoginRequest) -> TokenResponse:
        """Handle POST /v1/login requests.

        Raises:
            HTTPException: 401 on bad credentials, 500 on store failure
        """
        try:
            session = self._auth.login(request.username, request.password)
        except InvalidCredentialsError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="invalid credentials",
            ) from e
        except ShoppingApiError as e:
            raise to_http_error(e) from e
        return TokenResponse(token=session.token)

    def logout(self, session: SessionEntity) -> Response:
        """Handle POST /v1/logout requests by revoking the caller's session."""
        try:
            self._auth.logout(session.token)
        except ShoppingApiError as e:
            raise to_http_error(e) from e
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    def authenticate(self, authorization: str | None) -> SessionEntity:
        """Resolve the caller's session or fail with 401."""
        try:
            return self._auth.authenticate(authorization)
        except UnauthorizedError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="unauthorized",
                headers=_BEARER_CHALLENGE,
            ) from e

    def authorize(self, session: SessionEntity, required: Role) -> SessionEntity:
        """Check the session's role or fail with 403."""
        try:
            self._auth.authorize(session, required)
        except ForbiddenError as e:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="forbidden",
            ) from e
        return session
