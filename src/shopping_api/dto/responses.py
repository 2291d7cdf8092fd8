"""Response DTOs for API endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from shopping_api.entities import ShoppingListEntity


class ShoppingListResponse(BaseModel):
    """Response DTO for a single shopping list."""

    id: UUID = Field(..., description="List identifier")
    name: str = Field(..., description="Display name")
    items: list[str] = Field(default_factory=list, description="Items, in order")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last modification time")

    @classmethod
    def from_entity(cls, entity: ShoppingListEntity) -> "ShoppingListResponse":
        """Convert a domain entity into the API representation."""
        return cls(
            id=entity.id,
            name=entity.name,
            items=list(entity.items),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class TokenResponse(BaseModel):
    """Response DTO for a successful login."""

    token: str = Field(..., description="Bearer token for the Authorization header")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the list store is reachable")
    store_backend: str = Field(..., description="Configured store backend")
