"""Category lookup result."""

from dataclasses import dataclass
from enum import Enum

from .category import Category


class LookupStatus(str, Enum):
    """Outcome of fetching a category by id."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class CategoryLookup:
    """Result of a by-id lookup: the category, an explicit miss, or a failure.

    Attributes:
        status: Which variant this is
        category: The stored category (FOUND only)
        error: The exception raised by the store (FAILED only)
    """

    status: LookupStatus
    category: Category | None = None
    error: Exception | None = None

    @classmethod
    def found(cls, category: Category) -> "CategoryLookup":
        return cls(status=LookupStatus.FOUND, category=category)

    @classmethod
    def not_found(cls) -> "CategoryLookup":
        return cls(status=LookupStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: Exception) -> "CategoryLookup":
        return cls(status=LookupStatus.FAILED, error=error)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def is_not_found(self) -> bool:
        return self.status is LookupStatus.NOT_FOUND

    @property
    def is_failed(self) -> bool:
        return self.status is LookupStatus.FAILED
