"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from category_api.repositories import SqlCategoryRepository
    from category_api.services import CategoryService

    service = CategoryService.create(repository=SqlCategoryRepository.create())
    ```
"""

from .category_service import CategoryService

__all__ = [
    "CategoryService",
]
