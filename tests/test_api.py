"""
Tests for the shopping list API surface: info, health, login and logout.
"""


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Shopping List API"
    assert data["endpoints"]["lists"] == "/v1/lists"


def test_health(client):
    """Test health check endpoint with the in-memory store."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["store_backend"] == "memory"


def test_login_admin(client):
    """Valid credentials return a non-empty token."""
    response = client.post("/v1/login", json={"username": "admin", "password": "password"})
    assert response.status_code == 200
    assert response.json()["token"]


def test_login_issues_distinct_tokens(client):
    """Each login creates a new session."""
    body = {"username": "user", "password": "password"}
    first = client.post("/v1/login", json=body).json()["token"]
    second = client.post("/v1/login", json=body).json()["token"]
    assert first != second


def test_login_wrong_password(client):
    """Wrong password is rejected with 401."""
    response = client.post("/v1/login", json={"username": "admin", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["detail"] == "invalid credentials"


def test_login_lone_surrogate_password(client):
    """A password that is not encodable as UTF-8 is just a wrong password."""
    response = client.post(
        "/v1/login",
        content=b'{"username": "admin", "password": "\\ud800"}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "invalid credentials"


def test_login_unknown_user_same_error(client):
    """Unknown users get exactly the same response as wrong passwords."""
    unknown = client.post("/v1/login", json={"username": "nobody", "password": "password"})
    wrong = client.post("/v1/login", json={"username": "admin", "password": "nope"})
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json()


def test_login_is_case_sensitive(client):
    """Usernames are matched exactly."""
    response = client.post("/v1/login", json={"username": "Admin", "password": "password"})
    assert response.status_code == 401


def test_login_malformed_body(client):
    """A body that is not JSON is a bad request."""
    response = client.post(
        "/v1/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400


def test_logout_revokes_token(client, admin_headers):
    """After logout the token no longer authenticates."""
    assert client.get("/v1/lists", headers=admin_headers).status_code == 200

    response = client.post("/v1/logout", headers=admin_headers)
    assert response.status_code == 204

    assert client.get("/v1/lists", headers=admin_headers).status_code == 401


def test_logout_requires_auth(client):
    """Logout without a token is unauthorized."""
    assert client.post("/v1/logout").status_code == 401
