"""User lookup protocol."""

from typing import Protocol, runtime_checkable

from shopping_api.entities import UserEntity


@runtime_checkable
class UserStore(Protocol):
    """Protocol for user directories."""

    def get(self, username: str) -> UserEntity | None:
        """Return the user with this exact (case-sensitive) name, or None."""
        ...
