"""User and role domain entities."""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Roles a user can hold."""

    ADMIN = "admin"
    USER = "user"

    def permits(self, required: "Role") -> bool:
        """Check whether this role satisfies a route's required role."""
        return required in _GRANTS[self]


# Every Role must appear here; a missing key fails loudly with KeyError.
_GRANTS: dict[Role, frozenset[Role]] = {
    Role.ADMIN: frozenset({Role.ADMIN, Role.USER}),
    Role.USER: frozenset({Role.USER}),
}


@dataclass(frozen=True)
class UserEntity:
    """A known user of the API.

    Attributes:
        username: Login name (case-sensitive)
        password: Plaintext password
        role: Role granted to the user
    """

    username: str
    password: str
    role: Role
