"""Search API endpoints."""

import time
from typing import Sequence

from fastapi import APIRouter, HTTPException, Query

from ..config import get_settings
from ..models.record import Record
from ..models.request import SearchRequest
from ..models.response import SearchResponse

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global instances
from ..engine_instance import search_engine, record_library


def run_search(query: str, records: Sequence[Record]) -> SearchResponse:
    """
    Search records and wrap the results in a response.

    Suggestions are only attached when a non-blank query ranked nothing.
    """
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    if len(records) > settings.max_records:
        raise HTTPException(
            status_code=400,
            detail=f"Too many records. Maximum is {settings.max_records} per search"
        )

    start_time = time.time()
    results = search_engine.search(records, query)

    suggestions = None
    if query.strip() and not results:
        suggestions = search_engine.suggest(records, query, settings.max_suggestions)

    return SearchResponse(
        query=query,
        execution_time_ms=(time.time() - start_time) * 1000,
        total_records=len(records),
        total_results=len(results),
        results=results,
        suggestions=suggestions
    )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search the command library",
    description="Rank the loaded commands against a free-text query"
)
async def search_library(
    q: str = Query("", description="Search query; blank lists every command")
) -> SearchResponse:
    """
    Search the loaded command library.

    Matches are case-insensitive and tolerate partial words, scattered
    characters and small typos. A blank query lists every command in
    insertion order.
    """
    try:
        return run_search(q, record_library.snapshot())

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Rank the supplied records, or the loaded library, against a query"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """
    Search using a structured request body.

    Callers that keep their own records can send them along with the
    query; otherwise the loaded library is searched.
    """
    records = request.records if request.records is not None else record_library.snapshot()

    try:
        return run_search(request.query, records)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )
