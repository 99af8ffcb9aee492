"""Pagination metadata schema."""

from pydantic import BaseModel, ConfigDict, Field


class PaginationMetaResponse(BaseModel):
    """Page metadata (1-based pages)."""

    model_config = ConfigDict(from_attributes=True)

    total: int = Field(..., description="Total number of matching records")
    total_pages: int = Field(..., description="Total number of pages")
    current_page: int = Field(..., description="Current page number")
    per_page: int = Field(..., description="Records per page")
    prev: int | None = Field(default=None, description="Previous page number, if any")
    next: int | None = Field(default=None, description="Next page number, if any")
