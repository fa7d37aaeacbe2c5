"""Dependency injection configuration for the FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from package_autocomplete.handlers import DirectiveHandler
from package_autocomplete.logger import get_logger
from package_autocomplete.protocols import PackageSource, QueryCache
from package_autocomplete.repositories import MemoryQueryCache, NuGetClient
from package_autocomplete.services import CompletionService, HoverService, PackageService

logger = get_logger(__name__)


def get_handler(request: Request) -> DirectiveHandler:
    """Dependency injection for DirectiveHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The DirectiveHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "directive_handler", None)
    if handler is None:
        raise RuntimeError("DirectiveHandler not initialized. Check lifespan setup.")
    return handler


def build_handler(source: PackageSource, cache: QueryCache) -> DirectiveHandler:
    """Wire services and handler around a package source and cache."""
    package_service = PackageService.create(source=source, cache=cache)
    return DirectiveHandler(
        completion_service=CompletionService(package_service=package_service),
        hover_service=HoverService(package_service=package_service),
        package_service=package_service,
    )


def make_lifespan(
    source: PackageSource | None = None,
    cache: QueryCache | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan context manager for the FastAPI app.

    Args:
        source: Package source to use. Defaults to a NuGetClient owned by the app.
        cache: Query cache to use. Defaults to a new MemoryQueryCache.

    Returns:
        Lifespan callable for FastAPI(lifespan=...)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned_client = NuGetClient.create() if source is None else None
        package_source = source or owned_client
        handler = build_handler(package_source, cache or MemoryQueryCache.create())

        app.state.directive_handler = handler
        logger.info("Directive services initialized")

        yield

        del app.state.directive_handler
        if owned_client is not None:
            await owned_client.close()
        logger.info("Directive services shut down")

    return lifespan


# Type alias for cleaner dependency injection
HandlerDep = Annotated[DirectiveHandler, Depends(get_handler)]
