"""
Tests for session validation and role-gated routes.
"""

from datetime import datetime, timedelta, timezone

import pytest

from shopping_api.api.app import app
from shopping_api.entities import Role, SessionEntity
from shopping_api.exceptions import (
    ForbiddenError,
    InvalidCredentialsError,
    StoreError,
    UnauthorizedError,
)
from shopping_api.repositories import InMemorySessionRepository, StaticUserRepository
from shopping_api.services import AuthService, extract_bearer_token


def _future() -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=1)


class FailingSessionStore(InMemorySessionRepository):
    """Session store whose lookups always fail."""

    def get_by_token(self, token: str) -> SessionEntity | None:
        raise StoreError("connection refused")


@pytest.fixture
def auth_service():
    return AuthService.create(
        session_store=InMemorySessionRepository(),
        user_store=StaticUserRepository.create(),
    )


# --- HTTP -------------------------------------------------------------------


def test_missing_authorization_header(client):
    response = client.get("/v1/lists")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_authorization_without_bearer_prefix(client, admin_headers):
    token = admin_headers["Authorization"].removeprefix("Bearer ")
    response = client.get("/v1/lists", headers={"Authorization": f"Token {token}"})
    assert response.status_code == 401


def test_unknown_token(client):
    response = client.get("/v1/lists", headers={"Authorization": "Bearer not-a-session"})
    assert response.status_code == 401


def test_expired_session_rejected(client):
    past = datetime.now(timezone.utc) - timedelta(seconds=1)
    app.state.session_store.add("expired-token", "admin", past)

    response = client.get("/v1/lists", headers={"Authorization": "Bearer expired-token"})
    assert response.status_code == 401


def test_admin_token_on_admin_route(client, admin_headers):
    response = client.post("/v1/lists", json={"name": "Groceries"}, headers=admin_headers)
    assert response.status_code == 201


def test_user_token_on_admin_route(client, user_headers):
    response = client.post("/v1/lists", json={"name": "Groceries"}, headers=user_headers)
    assert response.status_code == 403
    assert response.json()["detail"] == "forbidden"


def test_user_token_on_user_route(client, user_headers):
    assert client.get("/v1/lists", headers=user_headers).status_code == 200


def test_session_for_unknown_user_is_forbidden_on_admin_route(client):
    app.state.session_store.add("ghost-token", "ghost", _future())
    headers = {"Authorization": "Bearer ghost-token"}

    assert client.get("/v1/lists", headers=headers).status_code == 200
    assert client.post("/v1/lists", json={"name": "x"}, headers=headers).status_code == 403


def test_unauthenticated_admin_route_is_401_not_403(client):
    response = client.delete(f"/v1/lists/{'0' * 32}")
    assert response.status_code == 401


# --- AuthService ------------------------------------------------------------


@pytest.mark.parametrize(
    "header",
    [None, "", "Bearer", "Bearer ", "bearer abc", "Basic abc"],
)
def test_extract_bearer_token_rejects(header):
    with pytest.raises(UnauthorizedError):
        extract_bearer_token(header)


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc123") == "abc123"


def test_login_creates_session_with_ttl(auth_service):
    before = datetime.now(timezone.utc)
    session = auth_service.login("admin", "password")

    assert session.username == "admin"
    assert len(session.token) >= 32
    assert session.expires_at >= before + timedelta(days=7) - timedelta(seconds=5)
    assert session.expires_at <= datetime.now(timezone.utc) + timedelta(days=7)


def test_login_bad_credentials(auth_service):
    with pytest.raises(InvalidCredentialsError):
        auth_service.login("admin", "wrong")
    with pytest.raises(InvalidCredentialsError):
        auth_service.login("nobody", "password")


def test_authenticate_round_trip(auth_service):
    session = auth_service.login("user", "password")
    resolved = auth_service.authenticate(f"Bearer {session.token}")
    assert resolved.username == "user"


def test_authenticate_fails_closed_on_store_error():
    service = AuthService.create(
        session_store=FailingSessionStore(),
        user_store=StaticUserRepository.create(),
    )
    with pytest.raises(UnauthorizedError):
        service.authenticate("Bearer anything")


def test_authorize_roles(auth_service):
    admin = auth_service.authenticate(f"Bearer {auth_service.login('admin', 'password').token}")
    user = auth_service.authenticate(f"Bearer {auth_service.login('user', 'password').token}")

    assert auth_service.authorize(admin, Role.ADMIN).role is Role.ADMIN
    assert auth_service.authorize(user, Role.USER).role is Role.USER
    with pytest.raises(ForbiddenError):
        auth_service.authorize(user, Role.ADMIN)


def test_logout(auth_service):
    session = auth_service.login("user", "password")
    assert auth_service.logout(session.token) is True
    assert auth_service.logout(session.token) is False
    with pytest.raises(UnauthorizedError):
        auth_service.authenticate(f"Bearer {session.token}")


def test_role_grants_cover_every_role():
    for role in Role:
        assert role.permits(role)
    assert Role.ADMIN.permits(Role.USER)
    assert not Role.USER.permits(Role.ADMIN)
