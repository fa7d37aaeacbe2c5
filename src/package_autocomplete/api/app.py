from typing import Any

from fastapi import FastAPI

from package_autocomplete import __version__
from package_autocomplete.api.dependencies import HandlerDep, make_lifespan
from package_autocomplete.config import settings
from package_autocomplete.dto import (
    CacheStatsResponse,
    CompletionRequest,
    CompletionResponse,
    HealthCheckResponse,
    HoverRequest,
    HoverResponse,
)
from package_autocomplete.protocols import PackageSource, QueryCache


def create_app(
    source: PackageSource | None = None,
    cache: QueryCache | None = None,
) -> FastAPI:
    """Create the HTTP API.

    Args:
        source: Package source override (tests pass a fake feed).
        cache: Query cache override.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Package Autocomplete API",
        description="Completion and hover for #:package, #:sdk and #:property directives",
        version=__version__,
        lifespan=make_lifespan(source=source, cache=cache),
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Package Autocomplete API",
            "version": __version__,
            "endpoints": {
                "complete": "/complete",
                "hover": "/hover",
                "cache": "/cache",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.post("/complete", response_model=CompletionResponse)
    async def complete(request: CompletionRequest, handler: HandlerDep) -> CompletionResponse:
        """Suggest completions for the text before the cursor."""
        return await handler.complete(request)

    @app.post("/hover", response_model=HoverResponse)
    async def hover(request: HoverRequest, handler: HandlerDep) -> HoverResponse:
        """Documentation for the directive token under the pointer."""
        return await handler.hover(request)

    @app.get("/cache/stats", response_model=CacheStatsResponse)
    async def cache_stats(handler: HandlerDep) -> CacheStatsResponse:
        """Package search cache statistics."""
        return await handler.get_stats()

    @app.delete("/cache")
    async def clear_cache(handler: HandlerDep) -> dict[str, Any]:
        """Drop all cached package searches."""
        return await handler.clear_cache()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "package_autocomplete.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
