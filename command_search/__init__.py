"""
Command Search - fuzzy search and ranking for a personal command library.

This package scores saved commands (name, command text, description and
tags) against a free-text query, tolerating partial words, scattered
characters and small typos, and returns them ranked by relevance with
match spans for highlighting.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .models.record import Record
from .models.response import RankedResult, SearchResponse

__all__ = [
    "SearchEngine",
    "Record",
    "RankedResult",
    "SearchResponse",
]
