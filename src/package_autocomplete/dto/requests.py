"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field, model_validator


class CompletionRequest(BaseModel):
    """Request DTO for directive completion.

    The handler will convert this to internal calls to the service layer.
    """

    line: str = Field(..., description="Full text of the line the cursor is on")
    character: int | None = Field(
        None,
        description="Zero-based cursor column (defaults to the end of the line)",
        ge=0,
    )
    session: str | None = Field(
        None,
        description="Key grouping requests from one editor context (e.g. document URI); "
        "only the latest request per session returns items. Omit to never be superseded",
        min_length=1,
    )

    @model_validator(mode="after")
    def _check_character(self) -> "CompletionRequest":
        if self.character is not None and self.character > len(self.line):
            raise ValueError("character must not exceed the line length")
        return self

    @property
    def text_before_cursor(self) -> str:
        """The line truncated at the cursor."""
        if self.character is None:
            return self.line
        return self.line[: self.character]


class HoverRequest(BaseModel):
    """Request DTO for hover documentation."""

    line: str = Field(..., description="Full text of the hovered line")
    character: int = Field(..., description="Zero-based column under the pointer", ge=0)
