"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    CreateListRequest,
    LoginRequest,
    PatchListRequest,
    PushItemRequest,
    ReplaceListRequest,
)
from .responses import HealthCheckResponse, ShoppingListResponse, TokenResponse

__all__ = [
    "CreateListRequest",
    "ReplaceListRequest",
    "PatchListRequest",
    "PushItemRequest",
    "LoginRequest",
    "ShoppingListResponse",
    "TokenResponse",
    "HealthCheckResponse",
]
