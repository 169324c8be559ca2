"""Result and response models."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .record import Record


class MatchSpan(BaseModel):
    """Half-open character range ``[start, end)`` that matched the query."""

    start: int = Field(..., ge=0, description="Index of the first matched character")
    end: int = Field(..., ge=0, description="Index one past the last matched character")


class FieldScores(BaseModel):
    """Per-field relevance scores (0-1)."""

    name: float = Field(..., ge=0.0, le=1.0)
    value: float = Field(..., ge=0.0, le=1.0)
    description: float = Field(..., ge=0.0, le=1.0)
    tags: float = Field(..., ge=0.0, le=1.0, description="Best score over all tags")


class FieldHighlights(BaseModel):
    """Per-field match spans for highlight rendering."""

    name: List[MatchSpan] = Field(default_factory=list)
    value: List[MatchSpan] = Field(default_factory=list)
    description: List[MatchSpan] = Field(default_factory=list)
    tags: List[List[MatchSpan]] = Field(
        default_factory=list, description="One span list per tag, in tag order"
    )


class RankedResult(BaseModel):
    """A record annotated with its relevance for one query.

    ``score``, ``relevance_percent``, ``field_scores`` and ``highlights``
    are all ``None`` for the unfiltered (empty query) listing.
    """

    record: Record = Field(..., description="The matched record")
    score: Optional[float] = Field(None, ge=0.0, description="Weighted aggregate score")
    relevance_percent: Optional[int] = Field(None, description="Aggregate score as a rounded percentage")
    field_scores: Optional[FieldScores] = Field(None, description="Per-field scores")
    highlights: Optional[FieldHighlights] = Field(None, description="Per-field match spans")


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_records: int = Field(..., description="Number of records searched")
    total_results: int = Field(..., description="Number of results returned")
    results: List[RankedResult] = Field(..., description="Ranked results")
    suggestions: Optional[List[str]] = Field(None, description="Alternative names if nothing matched")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class RecordListResponse(BaseModel):
    """Response listing the records currently loaded."""

    total_records: int = Field(..., description="Number of records loaded")
    records: List[Record] = Field(..., description="Loaded records in insertion order")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    total_records: int = Field(..., description="Number of records loaded")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Component status")
