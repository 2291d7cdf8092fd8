"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .auth_service import AuthService, extract_bearer_token
from .list_service import ListService, parse_list_id

__all__ = [
    "AuthService",
    "ListService",
    "extract_bearer_token",
    "parse_list_id",
]
