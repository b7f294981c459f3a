"""Repository layer for data access.

This layer hides the persistence backend (relational database, Redis)
behind the CategoryStore protocol. This enables:
- Easy swapping of implementations
- Unit testing with mock implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from category_api.config import settings
from category_api.protocols import CategoryStore

from .redis_repository import RedisCategoryRepository
from .sql_repository import SqlCategoryRepository


def create_repository(backend: str | None = None) -> CategoryStore:
    """Build the repository for the configured store backend.

    Args:
        backend: "sql" or "redis". If None, uses settings.

    Returns:
        A CategoryStore implementation
    """
    backend = backend or settings.store_backend
    if backend == "redis":
        return RedisCategoryRepository.create()
    if backend == "sql":
        return SqlCategoryRepository.create()
    raise ValueError(f"Unknown store backend: {backend!r}")


__all__ = [
    "CategoryStore",
    "RedisCategoryRepository",
    "SqlCategoryRepository",
    "create_repository",
]
