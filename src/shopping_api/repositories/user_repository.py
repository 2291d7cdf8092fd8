"""Static in-memory user directory."""

from shopping_api.entities import Role, UserEntity

DEFAULT_USERS = (
    UserEntity(username="admin", password="password", role=Role.ADMIN),
    UserEntity(username="user", password="password", role=Role.USER),
)


class StaticUserRepository:
    """Fixed user table built at startup (satisfies UserStore).

    Users are neither persisted nor created at runtime.
    """

    def __init__(self, users: tuple[UserEntity, ...] | list[UserEntity]) -> None:
        self._users = {user.username: user for user in users}

    @classmethod
    def create(cls) -> "StaticUserRepository":
        """Factory method returning the default admin/user table."""
        return cls(DEFAULT_USERS)

    def get(self, username: str) -> UserEntity | None:
        return self._users.get(username)
