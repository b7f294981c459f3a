#!/usr/bin/env python3
"""
Demo script for the category API.

Runs every handler operation against an in-memory SQLite store and prints
the status code and body of each response.
"""

import asyncio

from category_api import Category, CategoryHandler, CategoryService, SqlCategoryRepository
from category_api.handlers import HandlerResult


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def print_result(label: str, result: HandlerResult) -> None:
    print(f"  {label:<28} -> {result.status_code}  {result.body}")


async def demo_crud(handler: CategoryHandler) -> None:
    """Demonstrate the happy path."""
    print_section("CRUD Operations")

    for name in ["Books", "Music", "Films"]:
        print_result(f"create {name!r}", await handler.create_category(Category(name=name)))

    print(f"  {'list':<28} -> {await handler.list_categories()}")
    print_result("get 2", await handler.get_category(2))
    print_result("update 2 -> 'Albums'", await handler.update_category(2, Category(name="Albums")))
    print_result("delete 3", await handler.delete_category(3))
    print(f"  {'list':<28} -> {await handler.list_categories()}")


async def demo_rejections(handler: CategoryHandler) -> None:
    """Demonstrate validation and not-found responses."""
    print_section("Rejected Requests")

    print_result("create with no name", await handler.create_category(Category()))
    print_result("create with blank name", await handler.create_category(Category(name="  ")))
    print_result("update 1 with empty name", await handler.update_category(1, Category(name="")))
    print_result("get 99", await handler.get_category(99))
    print_result("update 99", await handler.update_category(99, Category(name="X")))
    print_result("delete 3 again", await handler.delete_category(3))


async def main() -> None:
    """Run all demos."""
    print("\n" + "=" * 70)
    print("  CATEGORY API DEMO")
    print("=" * 70)

    repository = SqlCategoryRepository.create(database_url="sqlite://")
    handler = CategoryHandler(category_service=CategoryService.create(repository=repository))

    await demo_crud(handler)
    await demo_rejections(handler)

    print("\n" + "=" * 70)
    print("  Demo completed!")
    print("=" * 70 + "\n")


if __name__ == "__main__":
    asyncio.run(main())
