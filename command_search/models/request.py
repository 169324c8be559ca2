"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .record import Record


class SearchRequest(BaseModel):
    """Request model for search queries.

    When ``records`` is omitted the loaded command library is searched.
    """

    query: str = Field(default="", description="Search query; blank lists everything")
    records: Optional[List[Record]] = Field(
        None, description="Records to search instead of the loaded library"
    )

    @field_validator("query", mode="before")
    @classmethod
    def default_query(cls, v: Optional[str]) -> str:
        """Treat a missing query as blank."""
        return "" if v is None else v


class RecordsLoadRequest(BaseModel):
    """Request model for replacing the loaded records."""

    records: List[Record] = Field(..., description="Records to load")
