"""
Tests for category validation.
"""

import pytest

from category_api.entities import Category, is_valid_category


@pytest.mark.parametrize("name", ["Books", " Books ", "a"])
def test_valid_names(name):
    assert is_valid_category(Category(name=name))


@pytest.mark.parametrize("name", [None, "", " ", "\t\n"])
def test_invalid_names(name):
    assert not is_valid_category(Category(id=1, name=name))


def test_none_category_is_invalid():
    assert not is_valid_category(None)


@pytest.mark.parametrize("category_id, expected", [(None, False), (0, False), (7, True)])
def test_has_identity(category_id, expected):
    assert Category(id=category_id, name="x").has_identity is expected
