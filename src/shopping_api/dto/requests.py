"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class CreateListRequest(BaseModel):
    """Request DTO for creating a shopping list."""

    name: str = Field(..., description="Display name of the list", min_length=1)
    items: list[str] = Field(default_factory=list, description="Initial items, in order")


class ReplaceListRequest(BaseModel):
    """Request DTO for a full update (PUT). Both fields are replaced."""

    name: str = Field(..., description="New display name", min_length=1)
    items: list[str] = Field(..., description="New items, replacing the current ones")


class PatchListRequest(BaseModel):
    """Request DTO for a partial update (PATCH).

    Absent or null fields are left unchanged; an empty name also counts
    as absent.
    """

    name: str | None = Field(None, description="New name (empty string keeps the current one)")
    items: list[str] | None = Field(None, description="Replacement items")


class PushItemRequest(BaseModel):
    """Request DTO for appending one item to a list."""

    item: str = Field(..., description="Item to append", min_length=1)


class LoginRequest(BaseModel):
    """Request DTO for logging in."""

    username: str = Field(..., description="Case-sensitive username")
    password: str = Field(..., description="Plaintext password")
