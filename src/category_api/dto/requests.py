"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from category_api.entities import Category


class CategoryRequest(BaseModel):
    """Request DTO for creating or updating a category.

    ``name`` is optional here on purpose: a missing or blank name reaches
    the handler, which answers 400 "Invalid category".
    """

    id: int | None = Field(None, description="Category id; omit or 0 to let the store assign one")
    name: str | None = Field(None, description="Category name")

    def to_entity(self) -> Category:
        return Category(id=self.id, name=self.name)
