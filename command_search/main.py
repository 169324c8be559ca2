"""Main FastAPI application for the command search service."""

import json
import logging
import os
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, List

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import structlog

from .api import (
    search_router,
    records_router,
    health_router,
)
from .config import get_settings
from .engine_instance import record_library
from .models.record import Record
from .models.response import ErrorResponse

settings = get_settings()

# Configure structured logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

SAMPLE_RECORDS_PATH = os.path.join(os.path.dirname(__file__), "sample_commands.json")

DEFAULT_RECORDS = [
    Record(
        id="1",
        name="Git Status",
        value="git status",
        description="Show the working tree status",
        tags=["git", "status"]
    ),
    Record(
        id="2",
        name="List Files",
        value="ls -la",
        description="List all files with details",
        tags=["filesystem", "list"]
    ),
    Record(
        id="3",
        name="Docker Compose Up",
        value="docker-compose up -d",
        description="Start services in detached mode",
        tags=["docker", "compose"]
    ),
]


def parse_records(raw_records: Any) -> List[Record]:
    """
    Build records from decoded JSON, skipping entries that fail validation.

    Args:
        raw_records: Decoded JSON; expected to be a list of record objects

    Returns:
        Valid records in input order
    """
    if not isinstance(raw_records, list):
        raise ValueError("Expected a JSON array of records")

    records = []
    for position, raw in enumerate(raw_records):
        try:
            records.append(Record.model_validate(raw))
        except ValidationError as e:
            logger.warning("Skipping invalid record", position=position, errors=e.error_count())

    return records


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Command Search service", version=settings.app_version)

    records_path = settings.sample_records_path or SAMPLE_RECORDS_PATH
    try:
        with open(records_path, 'r', encoding='utf-8') as f:
            records = parse_records(json.load(f))

        record_library.load(records)
        logger.info("Sample records loaded from JSON", path=records_path, total_records=len(records))
    except FileNotFoundError:
        logger.warning("Sample records file not found, using default commands", path=records_path)
        record_library.load(DEFAULT_RECORDS)
    except Exception as e:
        logger.error("Failed to load records", path=records_path, error=str(e))
        raise

    yield

    # Shutdown
    logger.info("Shutting down Command Search service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Fuzzy search and ranking for a personal command library",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(search_router)
app.include_router(records_router)
app.include_router(health_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Fuzzy search and ranking for a personal command library",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "status": "running"
    }


# API info endpoint
@app.get("/api", summary="API information", description="Get detailed API information")
async def api_info() -> dict:
    """Get detailed API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "search": "/api/v1/search?q={query}",
            "records": "/api/v1/records",
            "health": "/api/v1/health"
        },
        "features": [
            "Exact and substring matching with match highlights",
            "Subsequence fuzzy matching",
            "Word prefix matching and typo tolerance",
            "Weighted ranking across name, command, description and tags",
            "Name suggestions for queries with no results"
        ],
        "limits": {
            "max_query_length": settings.max_query_length,
            "max_records": settings.max_records
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "command_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
