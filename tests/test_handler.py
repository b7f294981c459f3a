"""
Tests for CategoryHandler status and body selection.
"""

import pytest

from category_api.entities import Category
from category_api.errors import StoreError
from category_api.handlers import INVALID_CATEGORY

INVALID_NAMES = [None, "", "   "]


async def test_list_returns_store_categories_in_order(seeded_repository, sql_handler):
    """List returns every stored category with names intact."""
    result = await sql_handler.list_categories()

    assert [c.name for c in result] == ["Category1", "Category2"]
    assert [c.id for c in result] == [1, 2]


async def test_list_propagates_store_failure(mock_store, mock_handler):
    """List failures are not turned into a response."""
    mock_store.list_all.side_effect = RuntimeError("Failed to retrieve categories")

    with pytest.raises(RuntimeError):
        await mock_handler.list_categories()


async def test_get_existing_category(mock_store, mock_handler):
    """Get returns 200 and the stored category."""
    category = Category(id=1, name="Category1")
    mock_store.get_by_id.return_value = category

    result = await mock_handler.get_category(1)

    assert result.status_code == 200
    assert result.body is category
    mock_store.get_by_id.assert_called_once_with(1)


async def test_get_missing_category(mock_store, mock_handler):
    """Get returns 404 with the dash wording."""
    mock_store.get_by_id.return_value = None

    result = await mock_handler.get_category(1)

    assert result.status_code == 404
    assert result.body == "Category not found with ID - 1"


async def test_get_store_failure(mock_store, mock_handler):
    """A failing lookup becomes 400."""
    mock_store.get_by_id.side_effect = RuntimeError("Failed to retrieve category")

    result = await mock_handler.get_category(99)

    assert result.status_code == 400
    assert result.body == "Failed to retrieve category with ID - 99"
    mock_store.get_by_id.assert_called_once_with(99)


async def test_create_valid_category(mock_store, mock_handler):
    """Create saves the category and echoes it."""
    category = Category(id=0, name="New Category")

    result = await mock_handler.create_category(category)

    assert result.status_code == 200
    assert result.body is category
    mock_store.save.assert_called_once_with(category)


@pytest.mark.parametrize("name", INVALID_NAMES)
async def test_create_invalid_category(mock_store, mock_handler, name):
    """Create rejects a missing or blank name without saving."""
    result = await mock_handler.create_category(Category(id=0, name=name))

    assert result.status_code == 400
    assert result.body == INVALID_CATEGORY
    mock_store.save.assert_not_called()


async def test_create_then_get_round_trip(sql_handler):
    """A created category can be fetched by its assigned id."""
    created = await sql_handler.create_category(Category(name="X"))
    assert created.body.id

    fetched = await sql_handler.get_category(created.body.id)

    assert fetched.status_code == 200
    assert fetched.body.name == "X"


async def test_update_existing_category(mock_store, mock_handler):
    """Update renames the stored object and saves that object once."""
    existing = Category(id=1, name="Category1")
    updated = Category(id=1, name="Updated")
    mock_store.get_by_id.return_value = existing

    result = await mock_handler.update_category(1, updated)

    assert result.status_code == 200
    assert result.body is existing
    assert existing.name == "Updated"
    mock_store.save.assert_called_once()
    assert mock_store.save.call_args.args[0] is existing


async def test_update_missing_category(mock_store, mock_handler):
    """Update returns 404 with the colon wording and does not save."""
    mock_store.get_by_id.return_value = None

    result = await mock_handler.update_category(1, Category(id=1, name="Updated Category"))

    assert result.status_code == 404
    assert result.body == "Category not found with ID: 1"
    mock_store.get_by_id.assert_called_once_with(1)
    mock_store.save.assert_not_called()


@pytest.mark.parametrize("name", INVALID_NAMES)
async def test_update_invalid_name(mock_store, mock_handler, name):
    """Update rejects a bad name and leaves the stored object alone."""
    existing = Category(id=1, name="Category 1")
    mock_store.get_by_id.return_value = existing

    result = await mock_handler.update_category(1, Category(id=1, name=name))

    assert result.status_code == 400
    assert result.body == INVALID_CATEGORY
    assert existing.name == "Category 1"
    mock_store.save.assert_not_called()


async def test_update_store_failure(mock_store, mock_handler):
    """A failing lookup during update becomes 400 without saving."""
    mock_store.get_by_id.side_effect = RuntimeError("boom")

    result = await mock_handler.update_category(1, Category(id=1, name="Updated"))

    assert result.status_code == 400
    assert result.body == "Failed to update category with ID - 1"
    mock_store.save.assert_not_called()


async def test_update_persists_new_name(seeded_repository, sql_handler):
    """Update against a real store keeps the id and changes the name."""
    result = await sql_handler.update_category(1, Category(name="Updated"))

    assert result.status_code == 200
    assert seeded_repository.get_by_id(1) == Category(id=1, name="Updated")


async def test_delete_existing_category(mock_store, mock_handler):
    """Delete removes the category and confirms."""
    mock_store.get_by_id.return_value = Category(id=1, name="Category1")

    result = await mock_handler.delete_category(1)

    assert result.status_code == 200
    assert result.body == "Deleted Category with ID - 1"
    mock_store.delete_by_id.assert_called_once_with(1)


async def test_delete_missing_category(mock_store, mock_handler):
    """Delete returns 404 and never calls delete on the store."""
    mock_store.get_by_id.return_value = None

    result = await mock_handler.delete_category(1)

    assert result.status_code == 404
    assert result.body == "Category not found with ID - 1"
    mock_store.delete_by_id.assert_not_called()


async def test_delete_store_failure(mock_store, mock_handler):
    """A failing lookup during delete becomes 400 and nothing is deleted."""
    mock_store.get_by_id.side_effect = RuntimeError("Failed to retrieve category")

    result = await mock_handler.delete_category(1)

    assert result.status_code == 400
    assert result.body == "Failed to delete category with ID - 1"
    mock_store.delete_by_id.assert_not_called()


async def test_delete_twice(seeded_repository, sql_handler):
    """The second delete of the same id is a 404."""
    first = await sql_handler.delete_category(1)
    second = await sql_handler.delete_category(1)

    assert first.status_code == 200
    assert second.status_code == 404
    assert second.body == "Category not found with ID - 1"


@pytest.mark.parametrize("operation", ["get_category", "delete_category"])
async def test_missing_ids_use_dash_wording(sql_handler, operation):
    result = await getattr(sql_handler, operation)(42)

    assert result.status_code == 404
    assert result.body == "Category not found with ID - 42"


async def test_health_check(mock_store, mock_handler):
    mock_store.health_check.return_value = False

    assert await mock_handler.health_check() == {
        "status": "unhealthy",
        "store_healthy": False,
    }


async def test_create_save_failure_propagates(mock_store, mock_handler):
    """A failing save is not turned into a response."""
    mock_store.save.side_effect = StoreError("Database operation failed", "save")

    with pytest.raises(StoreError):
        await mock_handler.create_category(Category(name="Books"))


async def test_update_save_failure_propagates(mock_store, mock_handler):
    mock_store.get_by_id.return_value = Category(id=1, name="Category1")
    mock_store.save.side_effect = StoreError("Database operation failed", "save")

    with pytest.raises(StoreError):
        await mock_handler.update_category(1, Category(name="Updated"))


async def test_delete_failure_after_lookup_propagates(mock_store, mock_handler):
    mock_store.get_by_id.return_value = Category(id=1, name="Category1")
    mock_store.delete_by_id.side_effect = RuntimeError("connection lost")

    with pytest.raises(RuntimeError):
        await mock_handler.delete_category(1)


async def test_create_long_name(sql_handler):
    """Names have no length cap beyond being non-blank."""
    result = await sql_handler.create_category(Category(name="x" * 256))

    assert result.status_code == 200
    assert result.body.name == "x" * 256
