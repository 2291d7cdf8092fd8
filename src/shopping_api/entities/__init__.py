"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .session import SessionEntity
from .shopping_list import ShoppingListEntity
from .user import Role, UserEntity

__all__ = ["Role", "SessionEntity", "ShoppingListEntity", "UserEntity"]
