from typing import Any

import uvicorn
from fastapi import APIRouter, FastAPI, status
from fastapi.responses import JSONResponse

from category_api.api.dependencies import HandlerDep, lifespan
from category_api.api.error_handlers import register_error_handlers
from category_api.config import settings
from category_api.dto import CategoryRequest, CategoryResponse, HealthCheckResponse
from category_api.handlers import CategoryHandler

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(handler: HandlerDep) -> list[CategoryResponse]:
    """List all categories."""
    categories = await handler.list_categories()
    return [CategoryResponse.from_entity(c) for c in categories]


@router.get("/{category_id}")
async def get_category(category_id: int, handler: HandlerDep) -> JSONResponse:
    """Get one category by id."""
    result = await handler.get_category(category_id)
    return result.to_response()


@router.post("")
async def create_category(request: CategoryRequest, handler: HandlerDep) -> JSONResponse:
    """Create a category."""
    result = await handler.create_category(request.to_entity())
    return result.to_response()


@router.put("/{category_id}")
async def update_category(
    category_id: int,
    request: CategoryRequest,
    handler: HandlerDep,
) -> JSONResponse:
    """Rename an existing category."""
    result = await handler.update_category(category_id, request.to_entity())
    return result.to_response()


@router.delete("/{category_id}")
async def delete_category(category_id: int, handler: HandlerDep) -> JSONResponse:
    """Delete a category."""
    result = await handler.delete_category(category_id)
    return result.to_response()


def create_app(handler: CategoryHandler | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        handler: Pre-built handler to serve with. If None, the lifespan
            builds one from settings.

    Returns:
        The configured FastAPI app
    """
    app = FastAPI(
        title="Category API",
        description="CRUD endpoint for categories backed by a relational store",
        version="0.1.0",
        lifespan=lifespan,
    )
    if handler is not None:
        app.state.category_handler = handler

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Category API",
            "version": "0.1.0",
            "endpoints": {
                "categories": "/api/categories",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> JSONResponse:
        """Health check endpoint."""
        health_status = await handler.health_check()
        return JSONResponse(
            status_code=(
                status.HTTP_200_OK
                if health_status["store_healthy"]
                else status.HTTP_503_SERVICE_UNAVAILABLE
            ),
            content=HealthCheckResponse(**health_status).model_dump(),
        )

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    uvicorn.run(
        "category_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
