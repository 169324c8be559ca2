"""Record management API endpoints."""

from fastapi import APIRouter, HTTPException, Path
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..models.record import Record
from ..models.request import RecordsLoadRequest
from ..models.response import RecordListResponse

router = APIRouter(prefix="/api/v1", tags=["records"])
settings = get_settings()

# Import the global record library
from ..engine_instance import record_library


@router.get(
    "/records",
    response_model=RecordListResponse,
    summary="List loaded records",
    description="Get every command currently loaded, in insertion order"
)
async def list_records() -> RecordListResponse:
    """Get every command currently loaded."""
    records = record_library.all_records()
    return RecordListResponse(total_records=len(records), records=records)


@router.put(
    "/records",
    summary="Replace loaded records",
    description="Replace the loaded commands with the supplied ones"
)
async def load_records(request: RecordsLoadRequest) -> JSONResponse:
    """
    Replace the loaded commands.

    Records without a name or command text are rejected by validation
    before they reach the library.
    """
    if len(request.records) > settings.max_records:
        raise HTTPException(
            status_code=400,
            detail=f"Too many records. Maximum is {settings.max_records}"
        )

    total = record_library.load(request.records)

    return JSONResponse(
        status_code=200,
        content={
            "message": "Records loaded successfully",
            "total_records": total
        }
    )


@router.post(
    "/records",
    response_model=Record,
    status_code=201,
    summary="Add a record",
    description="Add a command, replacing any command with the same id"
)
async def add_record(record: Record) -> Record:
    """Add a single command to the library."""
    if record_library.get(record.id) is None and len(record_library) >= settings.max_records:
        raise HTTPException(
            status_code=400,
            detail=f"Too many records. Maximum is {settings.max_records}"
        )

    record_library.add(record)
    return record


@router.delete(
    "/records/{record_id}",
    summary="Remove a record",
    description="Remove a command from the library"
)
async def remove_record(
    record_id: str = Path(..., description="Id of the command to remove")
) -> JSONResponse:
    """Remove a single command from the library."""
    if not record_library.remove(record_id):
        raise HTTPException(
            status_code=404,
            detail=f"Record '{record_id}' not found"
        )

    return JSONResponse(
        status_code=200,
        content={"message": f"Record '{record_id}' removed successfully"}
    )
