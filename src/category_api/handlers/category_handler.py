"""HTTP handlers for category operations.

Handlers validate input, call the service and pick the status code and
body. Routes render the returned ``HandlerResult`` as JSON.
"""

import logging

from fastapi import status

from category_api.entities import Category, is_valid_category
from category_api.services import CategoryService

from .result import HandlerResult

logger = logging.getLogger(__name__)

INVALID_CATEGORY = "Invalid category"


class CategoryHandler:
    """HTTP handlers for category operations.

    This handler delegates persistence to CategoryService and handles
    HTTP-specific concerns like:
    - Rejecting categories without a usable name
    - Mapping lookup results to 200 / 404 / 400
    - Choosing the response message

    Example:
        ```python
        handler = CategoryHandler(category_service=service)

        @app.get("/api/categories/{category_id}")
        async def get_category(category_id: int):
            result = await handler.get_category(category_id)
            return result.to_response()
        ```
    """

    def __init__(self, category_service: CategoryService) -> None:
        """Initialize the category handler.

        Args:
            category_service: The category service (required).
        """
        self._categories = category_service

    async def list_categories(self) -> list[Category]:
        """Handle GET /api/categories requests.

        Returns:
            All stored categories, unmodified

        Raises:
            Exception: Store failures are not converted to a response
        """
        return self._categories.list_all()

    async def get_category(self, category_id: int) -> HandlerResult:
        """Handle GET /api/categories/{id} requests.

        Args:
            category_id: The category identifier

        Returns:
            200 with the category, 404 if absent, 400 if the lookup failed
        """
        lookup = self._categories.find(category_id)

        if lookup.is_found:
            return HandlerResult(status.HTTP_200_OK, lookup.category)

        if lookup.is_not_found:
            return HandlerResult(
                status.HTTP_404_NOT_FOUND,
                f"Category not found with ID - {category_id}",
            )

        logger.warning("Retrieving category %s failed: %s", category_id, lookup.error)
        return HandlerResult(
            status.HTTP_400_BAD_REQUEST,
            f"Failed to retrieve category with ID - {category_id}",
        )

    async def create_category(self, category: Category) -> HandlerResult:
        """Handle POST /api/categories requests.

        Args:
            category: The category to create

        Returns:
            200 with the saved category, or 400 if the name is missing or blank
        """
        if not is_valid_category(category):
            logger.info("Rejected category create: invalid name %r", category.name)
            return HandlerResult(status.HTTP_400_BAD_REQUEST, INVALID_CATEGORY)

        # The store writes the assigned id back onto this object
        self._categories.save(category)
        return HandlerResult(status.HTTP_200_OK, category)

    async def update_category(self, category_id: int, updated: Category) -> HandlerResult:
        """Handle PUT /api/categories/{id} requests.

        Loads the stored category, replaces its name and saves that stored
        object. The incoming object is never saved.

        Args:
            category_id: The category identifier
            updated: Carries the new name

        Returns:
            200 with the updated category, 404 if absent,
            400 if the name is invalid or the lookup failed
        """
        lookup = self._categories.find(category_id)

        if lookup.is_not_found:
            # Colon, unlike the get/delete wording
            return HandlerResult(
                status.HTTP_404_NOT_FOUND,
                f"Category not found with ID: {category_id}",
            )

        if lookup.is_failed:
            logger.warning(
                "Retrieving category %s for update failed: %s", category_id, lookup.error,
            )
            return HandlerResult(
                status.HTTP_400_BAD_REQUEST,
                f"Failed to update category with ID - {category_id}",
            )

        if not is_valid_category(updated):
            logger.info(
                "Rejected update of category %s: invalid name %r", category_id, updated.name,
            )
            return HandlerResult(status.HTTP_400_BAD_REQUEST, INVALID_CATEGORY)

        existing = lookup.category
        existing.name = updated.name
        self._categories.save(existing)
        return HandlerResult(status.HTTP_200_OK, existing)

    async def delete_category(self, category_id: int) -> HandlerResult:
        """Handle DELETE /api/categories/{id} requests.

        Args:
            category_id: The category identifier

        Returns:
            200 with a confirmation, 404 if absent, 400 if the lookup failed
        """
        lookup = self._categories.find(category_id)

        if lookup.is_not_found:
            return HandlerResult(
                status.HTTP_404_NOT_FOUND,
                f"Category not found with ID - {category_id}",
            )

        if lookup.is_failed:
            logger.warning(
                "Retrieving category %s for delete failed: %s", category_id, lookup.error,
            )
            return HandlerResult(
                status.HTTP_400_BAD_REQUEST,
                f"Failed to delete category with ID - {category_id}",
            )

        self._categories.delete_by_id(category_id)
        return HandlerResult(status.HTTP_200_OK, f"Deleted Category with ID - {category_id}")

    async def health_check(self) -> dict:
        """Handle GET /health requests.

        Returns:
            Dict with health status
        """
        is_healthy = self._categories.is_healthy()

        return {
            "status": "healthy" if is_healthy else "unhealthy",
            "store_healthy": is_healthy,
        }
