"""Category domain entity."""

from dataclasses import dataclass


@dataclass
class Category:
    """Domain entity for a category.

    Mutable on purpose: an update loads the stored category, replaces its
    name and saves that same object back.

    Attributes:
        id: Identifier; None or 0 means the store assigns one on save
        name: Display label; None when the request omitted it
    """

    id: int | None = None
    name: str | None = None

    @property
    def has_identity(self) -> bool:
        """Whether this category already carries a store identifier."""
        return bool(self.id)


def is_valid_category(category: Category | None) -> bool:
    """Check that a category may be written.

    A category is valid when its name is present and not blank.
    """
    if category is None or category.name is None:
        return False
    return bool(category.name.strip())
