"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract, both the HTTP
surface this package exposes and the NuGet payloads it consumes.

Internal domain logic should use entities from the entities package.
"""

from .nuget import SearchResponse, SearchResultItem, VersionIndex
from .requests import CompletionRequest, HoverRequest
from .responses import (
    CacheStatsResponse,
    CompletionResponse,
    HealthCheckResponse,
    HoverInfo,
    HoverResponse,
    SuggestionItem,
    SuggestionKind,
)

__all__ = [
    "CompletionRequest",
    "HoverRequest",
    "SuggestionKind",
    "SuggestionItem",
    "CompletionResponse",
    "HoverInfo",
    "HoverResponse",
    "CacheStatsResponse",
    "HealthCheckResponse",
    "SearchResponse",
    "SearchResultItem",
    "VersionIndex",
]
