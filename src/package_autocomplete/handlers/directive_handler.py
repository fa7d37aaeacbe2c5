"""HTTP handlers for directive completion and hover.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

from fastapi import HTTPException, status

from package_autocomplete import __version__
from package_autocomplete.dto import (
    CacheStatsResponse,
    CompletionRequest,
    CompletionResponse,
    HealthCheckResponse,
    HoverRequest,
    HoverResponse,
)
from package_autocomplete.services import CompletionService, HoverService, PackageService


class DirectiveHandler:
    """HTTP handlers for directive operations.

    This handler delegates business logic to the services and handles
    HTTP-specific concerns like:
    - Converting service results to DTOs
    - Setting appropriate status codes
    - Error handling and responses
    """

    def __init__(
        self,
        completion_service: CompletionService,
        hover_service: HoverService,
        package_service: PackageService,
    ) -> None:
        """Initialize the directive handler.

        Args:
            completion_service: Completion orchestration (required).
            hover_service: Hover documentation (required).
            package_service: Cached package lookups, for cache endpoints (required).
        """
        self._completions = completion_service
        self._hovers = hover_service
        self._packages = package_service

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        """Handle POST /complete requests.

        Raises:
            HTTPException: If an unexpected error occurs
        """
        try:
            result = await self._completions.complete(
                request.text_before_cursor,
                session=request.session,
            )
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to compute completions: {e}",
            ) from e

        return CompletionResponse(
            context=result.context.kind.value if result.context else None,
            items=result.items,
            stale=result.stale,
        )

    async def hover(self, request: HoverRequest) -> HoverResponse:
        """Handle POST /hover requests.

        Raises:
            HTTPException: If an unexpected error occurs
        """
        try:
            info = await self._hovers.hover(request.line, request.character)
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to compute hover: {e}",
            ) from e

        return HoverResponse(hover=info)

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /cache/stats requests."""
        stats = self._packages.get_stats()
        return CacheStatsResponse(
            total_entries=stats.get("total_entries", 0),
            live_entries=stats.get("live_entries", 0),
            hits=stats.get("hits", 0),
            misses=stats.get("misses", 0),
            ttl_seconds=stats.get("ttl", 0.0),
        )

    async def clear_cache(self) -> dict:
        """Handle DELETE /cache requests.

        Returns:
            Dict with clear operation result
        """
        count = self._packages.clear_cache()
        return {
            "success": True,
            "deleted_count": count,
            "message": "Package cache cleared successfully",
        }

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        return HealthCheckResponse(status="healthy", version=__version__)
