"""
Contact list endpoints — upload + distribute, per-agent reads, import audit.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from agentlists.api.deps import get_assignment_store, get_db, get_import_service
from agentlists.api.schemas.lists import (
    AgentAllocation,
    ImportErrorResponse,
    ImportRunResponse,
    ListItemResponse,
    UploadResponse,
)
from agentlists.core.config import settings
from agentlists.core.constants import ErrorCode, PipelineStatus
from agentlists.core.logging import get_logger
from agentlists.pipeline.engine import PipelineResult
from agentlists.processing.pipeline import ImportService
from agentlists.repositories import import_runs as import_run_repository
from agentlists.store.base import AssignmentStore

logger = get_logger(__name__)

router = APIRouter(prefix="/lists", tags=["Lists"])

SUCCESS_MESSAGE = "List distributed and saved"

# Failure code → HTTP status.  Anything not listed is a server-side failure.
ERROR_STATUS: dict[str, int] = {
    ErrorCode.UNSUPPORTED_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MALFORMED_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SCHEMA_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INSUFFICIENT_WORKERS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.STORE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(
    http_status: int,
    message: str,
    error_code: str,
    *,
    imported: bool = False,
    import_id: str | None = None,
    details: dict | None = None,
) -> JSONResponse:
    body = ImportErrorResponse(
        message=message,
        error_code=error_code,
        imported=imported,
        import_id=import_id,
        details=details or {},
    )
    return JSONResponse(status_code=http_status, content=body.model_dump(mode="json"))


def _failure(result: PipelineResult, import_id: str | None) -> JSONResponse:
    code = result.error_code or ErrorCode.PIPELINE_ERROR
    return _error_response(
        ERROR_STATUS.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR),
        result.error or "Import failed",
        str(code),
        imported=result.status == PipelineStatus.PARTIALLY_COMPLETED,
        import_id=import_id,
        details=result.error_details,
    )


# ─── Upload ───────────────────────────────────────────────
@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ImportErrorResponse}, 413: {"model": ImportErrorResponse}, 500: {"model": ImportErrorResponse}},
)
async def upload_list(
    file: UploadFile | None = File(None),
    service: ImportService = Depends(get_import_service),
):
    """
    Import a contact list and spread it across the agent pool.

    Failures come back as JSON bodies rather than raised HTTP errors so
    the request session still commits the audit row, and any contacts
    written before a storage failure.
    """
    if file is None or not file.filename:
        return _error_response(status.HTTP_400_BAD_REQUEST, "No file uploaded", ErrorCode.NO_FILE)

    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_BYTES:
        return _error_response(
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            f"File too large (limit {settings.MAX_UPLOAD_BYTES} bytes)",
            ErrorCode.FILE_TOO_LARGE,
            details={"size_bytes": len(content), "limit_bytes": settings.MAX_UPLOAD_BYTES},
        )

    outcome = await service.import_file(file.filename, content)
    result = outcome.result
    import_id = str(outcome.import_id) if outcome.import_id else None

    if not result.succeeded:
        logger.warning(
            "Upload rejected",
            filename=file.filename,
            error_code=result.error_code,
            error=result.error,
        )
        return _failure(result, import_id)

    per_agent = result.context_summary.get("per_agent", {})
    return UploadResponse(
        message=SUCCESS_MESSAGE,
        import_id=import_id,
        records=result.records_persisted,
        agents=[AgentAllocation(agent_id=agent, count=count) for agent, count in per_agent.items()],
    )


# ─── Per-agent list ───────────────────────────────────────
@router.get("/agent/{agent_id}", response_model=list[ListItemResponse], response_model_by_alias=True)
async def get_agent_list(
    agent_id: uuid.UUID,
    store: AssignmentStore = Depends(get_assignment_store),
):
    """Contacts assigned to one agent, in the order they were saved."""
    items = await store.find_by_worker(agent_id)
    return [ListItemResponse.model_validate(item.to_dict()) for item in items]


# ─── Import audit ─────────────────────────────────────────
@router.get("/imports", response_model=list[ImportRunResponse])
async def list_imports(
    status_filter: str | None = None,
    limit: int = 50,
    offset: int = 0,
    db: AsyncSession = Depends(get_db),
):
    """Recent upload attempts, newest first."""
    runs = await import_run_repository.list_import_runs(
        db, status=status_filter, offset=offset, limit=min(limit, 200)
    )
    return [_run_response(run) for run in runs]


@router.get("/imports/{import_id}", response_model=ImportRunResponse)
async def get_import(import_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """One upload attempt."""
    run = await import_run_repository.get_import_run(db, import_id)
    if run is None:
        raise HTTPException(status_code=404, detail="Import not found")
    return _run_response(run)


def _run_response(run) -> ImportRunResponse:
    return ImportRunResponse(
        id=str(run.id),
        filename=run.filename,
        detected_format=run.detected_format,
        status=run.status,
        records_total=run.records_total,
        records_persisted=run.records_persisted,
        error_code=run.error_code,
        error_message=run.error_message,
        started_at=run.started_at,
        completed_at=run.completed_at,
        duration_ms=run.duration_ms,
    )
