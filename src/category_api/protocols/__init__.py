"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (SQL database -> Redis, etc.)
- Unit testing with mock implementations
- Clear separation of concerns

Usage:
    ```python
    from category_api.protocols import CategoryStore

    # Type hints work with any implementation
    repo: CategoryStore = SqlCategoryRepository.create()    # works
    repo: CategoryStore = RedisCategoryRepository.create()  # also works
    ```
"""

from .category_store import CategoryStore

__all__ = [
    "CategoryStore",
]
