"""Domain entities for internal representation.

These are plain dataclasses used internally by handlers, services and
repositories. They are NOT used for API contracts - use DTOs from the
dto package for that.

Entities should have:
- No JSON serialization logic
- No Pydantic validation
- No ORM mapping (see the db package)
"""

from .category import Category, is_valid_category
from .lookup import CategoryLookup, LookupStatus

__all__ = [
    "Category",
    "CategoryLookup",
    "LookupStatus",
    "is_valid_category",
]
