"""Payload models for the NuGet v3 APIs.

Only the fields this package reads are declared; everything else in the
response is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class SearchVersion(BaseModel):
    """One entry of the ``versions`` array in a search result."""

    model_config = ConfigDict(extra="ignore")

    version: str


class SearchResultItem(BaseModel):
    """One package in a search response."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    description: str | None = None
    total_downloads: int | None = Field(None, alias="totalDownloads", ge=0)
    versions: list[SearchVersion] | None = None


class SearchResponse(BaseModel):
    """Response of ``GET {search}/query``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    total_hits: int | None = Field(None, alias="totalHits")
    data: list[SearchResultItem]


class VersionIndex(BaseModel):
    """Response of ``GET {flat-container}/{id}/index.json``."""

    model_config = ConfigDict(extra="ignore")

    versions: list[str] = Field(default_factory=list)
