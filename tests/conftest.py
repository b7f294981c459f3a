"""Shared test fixtures - in-memory SQLite store, mocked store, handlers."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from category_api.entities import Category
from category_api.handlers import CategoryHandler
from category_api.protocols import CategoryStore
from category_api.repositories import SqlCategoryRepository
from category_api.services import CategoryService


@pytest.fixture
def sql_repository():
    """SQL repository on a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    repository = SqlCategoryRepository(engine=engine)
    repository.create_tables()
    yield repository
    engine.dispose()


@pytest.fixture
def sql_handler(sql_repository):
    """Handler wired to the in-memory SQL store."""
    return CategoryHandler(category_service=CategoryService.create(repository=sql_repository))


@pytest.fixture
def mock_store():
    """Store double for call verification and failure injection."""
    store = MagicMock(spec=CategoryStore)
    store.save.side_effect = lambda category: category
    return store


@pytest.fixture
def mock_handler(mock_store):
    """Handler wired to the mocked store."""
    return CategoryHandler(category_service=CategoryService.create(repository=mock_store))


@pytest.fixture
def seeded_repository(sql_repository):
    """SQL store holding Category1 (id 1) and Category2 (id 2)."""
    sql_repository.save(Category(name="Category1"))
    sql_repository.save(Category(name="Category2"))
    return sql_repository
