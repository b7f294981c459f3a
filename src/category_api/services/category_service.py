"""Category service.

Wraps the CategoryStore so that by-id fetches come back as a
``CategoryLookup`` value the handler can branch on.
"""

import logging

from category_api.entities import Category, CategoryLookup
from category_api.protocols import CategoryStore

logger = logging.getLogger(__name__)


class CategoryService:
    """Category orchestration service.

    This service depends on the CategoryStore PROTOCOL, so the backend
    (SQL database, Redis, a test double) can be swapped without changing
    service code.

    Example:
        ```python
        service = CategoryService.create(repository=SqlCategoryRepository.create())

        lookup = service.find(1)
        if lookup.is_found:
            print(lookup.category.name)
        ```
    """

    def __init__(self, repository: CategoryStore) -> None:
        """Initialize the category service.

        Args:
            repository: Category storage backend (required).
        """
        self._repository = repository

    @classmethod
    def create(cls, repository: CategoryStore) -> "CategoryService":
        """Factory method to create CategoryService.

        Args:
            repository: Category storage backend (required).

        Returns:
            Configured CategoryService instance
        """
        return cls(repository=repository)

    def list_all(self) -> list[Category]:
        """Fetch all categories. Store failures propagate."""
        return self._repository.list_all()

    def find(self, category_id: int) -> CategoryLookup:
        """Look up a category by id.

        Never raises: a store exception becomes a FAILED lookup.

        Args:
            category_id: The category identifier

        Returns:
            CategoryLookup that is FOUND, NOT_FOUND or FAILED
        """
        try:
            category = self._repository.get_by_id(category_id)
        except Exception as e:
            logger.exception("Lookup of category %s failed", category_id)
            return CategoryLookup.failed(e)

        if category is None:
            return CategoryLookup.not_found()
        return CategoryLookup.found(category)

    def save(self, category: Category) -> Category:
        """Persist a category. Store failures propagate.

        Args:
            category: The category to insert or update

        Returns:
            The saved category, carrying its id
        """
        return self._repository.save(category)

    def delete_by_id(self, category_id: int) -> bool:
        """Delete a category. Store failures propagate.

        Args:
            category_id: The category identifier

        Returns:
            True if a record was removed
        """
        return self._repository.delete_by_id(category_id)

    def is_healthy(self) -> bool:
        """Check if the store is reachable."""
        return self._repository.health_check()
