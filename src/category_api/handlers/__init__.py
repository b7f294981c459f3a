"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .category_handler import INVALID_CATEGORY, CategoryHandler
from .result import HandlerResult

__all__ = [
    "CategoryHandler",
    "HandlerResult",
    "INVALID_CATEGORY",
]
