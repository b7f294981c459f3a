"""SQLAlchemy implementation of CategoryStore.

This is the default repository. It maps ``Category`` entities to rows of
the ``categories`` table and satisfies the CategoryStore protocol.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from category_api.config import get_engine, get_session_factory
from category_api.db import Base, CategoryRecord
from category_api.entities import Category
from category_api.errors import StoreError

logger = logging.getLogger(__name__)


class SqlCategoryRepository:
    """Relational implementation using the SQLAlchemy ORM.

    This class satisfies the CategoryStore protocol through structural
    typing - no explicit inheritance needed.

    Every method opens its own session and commits once. Any SQLAlchemy
    error rolls the session back and is re-raised as ``StoreError``.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the SQL category repository.

        Args:
            engine: SQLAlchemy engine. If None, creates one from settings.
        """
        self._engine = engine or get_engine()
        self._session_factory: sessionmaker[Session] = get_session_factory(self._engine)

    @classmethod
    def create(
        cls,
        database_url: str | None = None,
        create_tables: bool = True,
    ) -> "SqlCategoryRepository":
        """Factory method to create SqlCategoryRepository with defaults.

        Args:
            database_url: Database URL. If None, uses settings.
            create_tables: Create missing tables on startup.

        Returns:
            Configured SqlCategoryRepository
        """
        repository = cls(engine=get_engine(database_url))
        if create_tables:
            repository.create_tables()
        return repository

    def create_tables(self) -> None:
        """Create the categories table if it does not exist."""
        Base.metadata.create_all(self._engine)

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        """Provide a session that rolls back and wraps errors on failure."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Database error during %s: %s", operation, e)
            raise StoreError("Database operation failed", operation) from e
        finally:
            session.close()

    def list_all(self) -> list[Category]:
        """Fetch every stored category ordered by id.

        Returns:
            List of categories
        """
        with self._session("list_all") as db:
            records = db.scalars(select(CategoryRecord).order_by(CategoryRecord.id)).all()
            return [record.to_entity() for record in records]

    def get_by_id(self, category_id: int) -> Category | None:
        """Fetch one category by primary key.

        Args:
            category_id: The category identifier

        Returns:
            The category, or None if absent
        """
        with self._session("get_by_id") as db:
            record = db.get(CategoryRecord, category_id)
            return record.to_entity() if record else None

    def save(self, category: Category) -> Category:
        """Insert or update a category.

        Args:
            category: The category to persist; its id is set after insert

        Returns:
            The same category object
        """
        with self._session("save") as db:
            record = None
            if category.has_identity:
                record = db.get(CategoryRecord, category.id)

            if record is None:
                record = CategoryRecord(name=category.name)
                if category.has_identity:
                    record.id = category.id
                db.add(record)
            else:
                record.name = category.name

            db.commit()
            category.id = record.id

        return category

    def delete_by_id(self, category_id: int) -> bool:
        """Delete a category by primary key.

        Args:
            category_id: The category identifier

        Returns:
            True if deleted, False if no such record
        """
        with self._session("delete_by_id") as db:
            record = db.get(CategoryRecord, category_id)
            if record is None:
                return False
            db.delete(record)
            db.commit()
            return True

    def health_check(self) -> bool:
        """Check if the database is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            with self._session("health_check") as db:
                db.execute(text("SELECT 1"))
            return True
        except StoreError:
            return False
