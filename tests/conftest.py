"""
Shared pytest fixtures.

The environment is configured before the package is imported because
settings are read once at import time.
"""

import os

os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault(
    "CORS_TRUSTED_ORIGINS",
    "http://localhost:9000,http://localhost:9002,http://localhost:3000",
)

from datetime import datetime, timezone  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from shopping_api.api.app import app  # noqa: E402
from shopping_api.entities import ShoppingListEntity  # noqa: E402
from shopping_api.repositories import InMemoryListRepository  # noqa: E402


class CountingListStore(InMemoryListRepository):
    """In-memory list store that records how often each method is called."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: dict[str, int] = {}

    def _count(self, name: str) -> None:
        self.calls[name] = self.calls.get(name, 0) + 1

    def get_by_id(self, list_id):
        self._count("get_by_id")
        return super().get_by_id(list_id)

    def get_all(self):
        self._count("get_all")
        return super().get_all()

    def update(self, list_id, name, items):
        self._count("update")
        return super().update(list_id, name, items)

    def partial_update(self, list_id, name, items):
        self._count("partial_update")
        return super().partial_update(list_id, name, items)

    def push_item(self, list_id, item):
        self._count("push_item")
        return super().push_item(list_id, item)

    def delete(self, list_id):
        self._count("delete")
        return super().delete(list_id)


@pytest.fixture
def client():
    """Create a test client with a fresh in-memory application state."""
    with TestClient(app) as test_client:
        yield test_client


def _login(client: TestClient, username: str) -> str:
    response = client.post("/v1/login", json={"username": username, "password": "password"})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin_headers(client):
    """Authorization headers for the admin user."""
    return {"Authorization": f"Bearer {_login(client, 'admin')}"}


@pytest.fixture
def user_headers(client):
    """Authorization headers for the non-admin user."""
    return {"Authorization": f"Bearer {_login(client, 'user')}"}


@pytest.fixture
def counting_store():
    """A call-counting in-memory list store."""
    return CountingListStore()


@pytest.fixture
def sample_list():
    """A standalone shopping list entity."""
    now = datetime.now(timezone.utc)
    return ShoppingListEntity(
        id=uuid4(),
        name="Groceries",
        items=("milk", "bread"),
        created_at=now,
        updated_at=now,
    )
