"""
Tests for the trusted-origin CORS middleware.
"""

TRUSTED = "http://localhost:3000"
UNTRUSTED = "http://evil.example.com"

ALLOW_HEADERS = (
    "access-control-allow-origin",
    "access-control-allow-methods",
    "access-control-allow-headers",
    "access-control-max-age",
)


def preflight(client, origin, method="POST", headers=None):
    request_headers = {"Origin": origin, "Access-Control-Request-Method": method}
    if headers is not None:
        request_headers["Access-Control-Request-Headers"] = headers
    return client.options("/v1/lists", headers=request_headers)


def test_vary_headers_without_origin(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers.get_list("vary") == ["Origin", "Access-Control-Request-Method"]
    assert "access-control-allow-origin" not in response.headers


def test_trusted_origin_simple_request(client):
    response = client.get("/", headers={"Origin": TRUSTED})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == TRUSTED


def test_untrusted_origin_simple_request(client):
    response = client.get("/", headers={"Origin": UNTRUSTED})
    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers


def test_trusted_preflight(client):
    response = preflight(client, TRUSTED, "PUT", "Authorization, Content-Type")

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == TRUSTED
    assert response.headers["access-control-allow-methods"] == (
        "GET, POST, PUT, PATCH, DELETE, OPTIONS"
    )
    assert response.headers["access-control-allow-headers"] == "Authorization, Content-Type"
    assert response.headers["access-control-max-age"] == "300"
    assert "Origin" in response.headers.get_list("vary")


def test_trusted_preflight_accepts_lowercase_headers(client):
    response = preflight(client, TRUSTED, "DELETE", "authorization,content-type")
    assert response.status_code == 200


def test_untrusted_preflight_gets_no_allow_origin(client):
    response = preflight(client, UNTRUSTED, "PUT", "Authorization")
    assert "access-control-allow-origin" not in response.headers
    assert "access-control-allow-methods" not in response.headers


def test_preflight_disallowed_header(client):
    response = preflight(client, TRUSTED, "POST", "Authorization, X-Custom")

    assert response.status_code == 403
    for header in ALLOW_HEADERS:
        assert header not in response.headers


def test_preflight_disallowed_method(client):
    response = preflight(client, TRUSTED, "TRACE")

    assert response.status_code == 405
    for header in ALLOW_HEADERS:
        assert header not in response.headers


def test_options_without_request_method_is_not_preflight(client):
    response = client.options("/v1/lists", headers={"Origin": TRUSTED})
    assert "access-control-allow-methods" not in response.headers
    assert response.headers["access-control-allow-origin"] == TRUSTED


def test_trusted_origin_on_error_response(client):
    response = client.get("/v1/lists", headers={"Origin": TRUSTED})
    assert response.status_code == 401
    assert response.headers["access-control-allow-origin"] == TRUSTED
