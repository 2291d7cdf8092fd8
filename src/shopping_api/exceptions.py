"""Domain exceptions.

Services and repositories raise these; handlers translate them into
HTTP responses. Nothing in here knows about status codes.
"""


class ShoppingApiError(Exception):
    """Base exception for the shopping list API."""


class InvalidListIdError(ShoppingApiError):
    """The given identifier is not a valid shopping list id."""

    def __init__(self, raw_id: str) -> None:
        super().__init__(f"invalid id: {raw_id!r}")
        self.raw_id = raw_id


class ListNotFoundError(ShoppingApiError):
    """No shopping list exists with the given id."""

    def __init__(self, list_id: object) -> None:
        super().__init__(f"list not found: {list_id}")
        self.list_id = list_id


class StoreError(ShoppingApiError):
    """The backing store failed or timed out."""


class InvalidCredentialsError(ShoppingApiError):
    """Username/password pair did not match a known user."""


class UnauthorizedError(ShoppingApiError):
    """The request carries no valid, unexpired session."""


class ForbiddenError(ShoppingApiError):
    """The session's user lacks the role required for the operation."""
