"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from category_api.config import settings
from category_api.handlers import CategoryHandler
from category_api.repositories import create_repository
from category_api.services import CategoryService
from category_api.utils import setup_logging

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> CategoryHandler:
    """Dependency injection for CategoryHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The CategoryHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "category_handler", None)
    if handler is None:
        raise RuntimeError("CategoryHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Builds all layers and stores the handler in app.state:
    1. Repository (data access) - chosen by STORE_BACKEND
    2. Service (business logic) - wraps the repository
    3. Handler (HTTP endpoints) - stored in app.state.category_handler

    A handler already placed on app.state (see ``create_app``) is used
    as-is and left in place on shutdown.

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    setup_logging(settings.log_level)

    if getattr(app.state, "category_handler", None) is not None:
        yield
        return

    logger.info("Starting Category API with %s store", settings.store_backend)

    repository = create_repository(settings.store_backend)
    category_service = CategoryService.create(repository=repository)
    category_handler = CategoryHandler(category_service=category_service)

    app.state.category_handler = category_handler

    logger.info("Category store healthy: %s", category_service.is_healthy())

    yield

    del app.state.category_handler
    logger.info("Category API shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[CategoryHandler, Depends(get_handler)]
