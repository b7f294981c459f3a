"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from category_api.entities import Category


class CategoryResponse(BaseModel):
    """Serialized category: ``{"id": int, "name": str}``."""

    id: int = Field(..., description="Category id")
    name: str = Field(..., description="Category name")

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResponse":
        return cls(id=category.id, name=category.name)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the category store is reachable")
