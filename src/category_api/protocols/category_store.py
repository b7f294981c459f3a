"""Category storage protocol.

Defines the interface for any backend that persists categories keyed by
integer id.

Implementations include:
- Relational database through SQLAlchemy (default)
- Redis hashes
"""

from typing import Protocol, runtime_checkable

from category_api.entities import Category


@runtime_checkable
class CategoryStore(Protocol):
    """Protocol for category storage backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed. Implementations raise ``StoreError`` when
    the backend itself fails; a missing category is not a failure.
    """

    def list_all(self) -> list[Category]:
        """Fetch every stored category.

        Returns:
            All categories, in insertion (id) order
        """
        ...

    def get_by_id(self, category_id: int) -> Category | None:
        """Fetch one category.

        Args:
            category_id: The category identifier

        Returns:
            The category, or None if no record has this id
        """
        ...

    def save(self, category: Category) -> Category:
        """Insert or update a category.

        A category with an id overwrites the record with that id (or is
        inserted at that id). A category without an id is inserted and the
        assigned id is written back onto it.

        Args:
            category: The category to persist

        Returns:
            The same category object, carrying its persistent id
        """
        ...

    def delete_by_id(self, category_id: int) -> bool:
        """Delete a category.

        Args:
            category_id: The category identifier

        Returns:
            True if a record was removed, False if none existed
        """
        ...

    def health_check(self) -> bool:
        """Check if the backend is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
