"""Redis implementation of CategoryStore.

Alternate backend selected with ``STORE_BACKEND=redis``. Layout:

- ``{prefix}:{id}``      hash with ``id`` and ``name`` fields
- ``{prefix}:ids``       sorted set of ids (score = id), for ordered listing
- ``{prefix}:next_id``   counter used to assign ids on insert
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import redis

from category_api.config import get_redis_client, settings
from category_api.entities import Category
from category_api.errors import StoreError

logger = logging.getLogger(__name__)

# Raise the counter to at least ARGV[1]; never lowers it
RAISE_COUNTER_SCRIPT = """
local current = tonumber(redis.call("GET", KEYS[1]) or "0")
local candidate = tonumber(ARGV[1])
if candidate > current then
    redis.call("SET", KEYS[1], candidate)
end
return redis.call("GET", KEYS[1])
"""


class RedisCategoryRepository:
    """Redis implementation using one hash per category.

    This class satisfies the CategoryStore protocol through structural
    typing - no explicit inheritance needed.

    The client must be created with ``decode_responses=True``.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis category repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
            key_prefix: Prefix for all keys. If None, uses settings.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.category_key_prefix
        self._raise_counter = self._client.register_script(RAISE_COUNTER_SCRIPT)

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisCategoryRepository":
        """Factory method to create RedisCategoryRepository with defaults.

        Args:
            key_prefix: Redis key prefix. If None, uses settings.

        Returns:
            Configured RedisCategoryRepository
        """
        return cls(key_prefix=key_prefix)

    def _key(self, category_id: int) -> str:
        return f"{self._prefix}:{category_id}"

    @property
    def _ids_key(self) -> str:
        return f"{self._prefix}:ids"

    @property
    def _counter_key(self) -> str:
        return f"{self._prefix}:next_id"

    @contextmanager
    def _errors(self, operation: str) -> Iterator[None]:
        """Re-raise Redis failures as StoreError."""
        try:
            yield
        except redis.RedisError as e:
            logger.error("Redis error during %s: %s", operation, e)
            raise StoreError("Redis operation failed", operation) from e

    def list_all(self) -> list[Category]:
        """Fetch every stored category ordered by id.

        Returns:
            List of categories
        """
        with self._errors("list_all"):
            ids = self._client.zrange(self._ids_key, 0, -1)
            if not ids:
                return []

            pipe = self._client.pipeline()
            for category_id in ids:
                pipe.hget(self._key(int(category_id)), "name")
            names = pipe.execute()

        # An id whose hash is gone was deleted between the two round trips
        return [
            Category(id=int(category_id), name=name)
            for category_id, name in zip(ids, names)
            if name is not None
        ]

    def get_by_id(self, category_id: int) -> Category | None:
        """Fetch one category.

        Args:
            category_id: The category identifier

        Returns:
            The category, or None if absent
        """
        with self._errors("get_by_id"):
            name = self._client.hget(self._key(category_id), "name")
        if name is None:
            return None
        return Category(id=category_id, name=name)

    def save(self, category: Category) -> Category:
        """Insert or update a category.

        Args:
            category: The category to persist; its id is set after insert

        Returns:
            The same category object
        """
        with self._errors("save"):
            if category.has_identity:
                # Keep the counter ahead of explicitly chosen ids
                self._raise_counter(keys=[self._counter_key], args=[category.id])
            else:
                category.id = int(self._client.incr(self._counter_key))

            pipe = self._client.pipeline()
            pipe.hset(
                self._key(category.id),
                mapping={"id": category.id, "name": category.name},
            )
            pipe.zadd(self._ids_key, {str(category.id): category.id})
            pipe.execute()

        return category

    def delete_by_id(self, category_id: int) -> bool:
        """Delete a category.

        Args:
            category_id: The category identifier

        Returns:
            True if deleted, False if no such record
        """
        with self._errors("delete_by_id"):
            pipe = self._client.pipeline()
            pipe.delete(self._key(category_id))
            pipe.zrem(self._ids_key, str(category_id))
            deleted, _ = pipe.execute()
        return deleted > 0

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
