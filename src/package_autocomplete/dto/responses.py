"""Response DTOs for API endpoints."""

from enum import Enum

from pydantic import BaseModel, Field


class SuggestionKind(str, Enum):
    """Presentation category of a suggestion (maps onto editor item kinds)."""

    KEYWORD = "keyword"
    MODULE = "module"
    VALUE = "value"
    PROPERTY = "property"
    ENUM_MEMBER = "enum-member"


class SuggestionItem(BaseModel):
    """A single completion suggestion."""

    label: str = Field(..., description="Text shown in the suggestion list")
    kind: SuggestionKind = Field(..., description="Presentation category")
    insert_text: str = Field(..., description="Text inserted when the suggestion is accepted")
    replace_start: int = Field(
        ...,
        description="Column where the replaced token starts; the replacement ends at the cursor",
        ge=0,
    )
    detail: str | None = Field(None, description="Short one-line detail")
    documentation: str | None = Field(None, description="Markdown documentation")
    sort_text: str | None = Field(None, description="Key used to order suggestions")


class CompletionResponse(BaseModel):
    """Response DTO for a completion request."""

    context: str | None = Field(
        None,
        description="Directive context that was recognized, or null if none",
    )
    items: list[SuggestionItem] = Field(default_factory=list)
    stale: bool = Field(
        False,
        description="True when a newer request in the same session superseded this one",
    )


class HoverInfo(BaseModel):
    """Hover documentation for a directive token."""

    contents: str = Field(..., description="Markdown documentation")
    start: int = Field(..., description="Column where the hovered token starts", ge=0)
    end: int = Field(..., description="Column just past the hovered token", ge=0)


class HoverResponse(BaseModel):
    """Response DTO for a hover request."""

    hover: HoverInfo | None = Field(None, description="Documentation, or null if nothing to show")


class CacheStatsResponse(BaseModel):
    """Response DTO for package cache statistics."""

    total_entries: int = Field(..., description="Number of cached queries", ge=0)
    live_entries: int = Field(..., description="Entries still inside the validity window", ge=0)
    hits: int = Field(..., ge=0)
    misses: int = Field(..., ge=0)
    ttl_seconds: float = Field(..., description="Validity window in seconds", gt=0)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy'")
    version: str = Field(..., description="Package version")
