"""Data models for the command search service."""

from .record import Record
from .response import (
    MatchSpan,
    FieldScores,
    FieldHighlights,
    RankedResult,
    SearchResponse,
    RecordListResponse,
    ErrorResponse,
    HealthResponse,
)
from .request import SearchRequest, RecordsLoadRequest

__all__ = [
    "Record",
    "MatchSpan",
    "FieldScores",
    "FieldHighlights",
    "RankedResult",
    "SearchResponse",
    "RecordListResponse",
    "ErrorResponse",
    "HealthResponse",
    "SearchRequest",
    "RecordsLoadRequest",
]
