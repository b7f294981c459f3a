"""Category API - CRUD endpoint for a single Category resource.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (CategoryStore)
    - repositories: Data access implementations (SQLAlchemy, Redis)
    - services: Business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from category_api import CategoryHandler, CategoryService, SqlCategoryRepository

    service = CategoryService.create(repository=SqlCategoryRepository.create())
    handler = CategoryHandler(category_service=service)
    ```

For HTTP API:
    ```python
    from category_api.api.app import app
    ```
"""

from category_api.config import get_settings, settings
from category_api.dto import CategoryRequest, CategoryResponse
from category_api.entities import Category, CategoryLookup, LookupStatus
from category_api.errors import CategoryApiError, StoreError
from category_api.handlers import CategoryHandler, HandlerResult
from category_api.protocols import CategoryStore
from category_api.repositories import (
    RedisCategoryRepository,
    SqlCategoryRepository,
    create_repository,
)
from category_api.services import CategoryService

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "CategoryStore",
    # Services (business logic)
    "CategoryService",
    # Handlers (HTTP)
    "CategoryHandler",
    "HandlerResult",
    # Repositories (data access)
    "SqlCategoryRepository",
    "RedisCategoryRepository",
    "create_repository",
    # Entities (domain models)
    "Category",
    "CategoryLookup",
    "LookupStatus",
    # Errors
    "CategoryApiError",
    "StoreError",
    # DTOs (API contracts)
    "CategoryRequest",
    "CategoryResponse",
]
