"""Error hierarchy for the category API.

Only infrastructure failures are exceptions. A missing category is a
``CategoryLookup`` variant and an invalid name is a predicate result;
neither is raised.
"""

from fastapi import status


class CategoryApiError(Exception):
    """Base exception for all category API errors."""

    code = "CATEGORY_API_ERROR"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        """Convert to the standard REST error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }


class StoreError(CategoryApiError):
    """Raised when the persistence backend fails.

    The backend exception is chained as ``__cause__``.
    """

    code = "STORE_ERROR"

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(message)
        self.operation = operation

    def to_response(self) -> dict:
        # Backend details stay in the logs
        return {
            "error": {
                "code": self.code,
                "message": f"Store operation failed: {self.operation}",
            }
        }
