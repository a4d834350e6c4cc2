"""
ImportRun repository — audit rows for upload attempts.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from agentlists.core.constants import PipelineStatus
from agentlists.db.models.import_run import ImportRun
from agentlists.pipeline.engine import PipelineResult


async def create_import_run(db: AsyncSession, *, filename: str) -> ImportRun:
    """Open a RUNNING audit row before the pipeline starts."""
    run = ImportRun(
        filename=filename,
        status=PipelineStatus.RUNNING.value,
        started_at=datetime.now(timezone.utc),
    )
    db.add(run)
    await db.flush()
    return run


async def finish_import_run(
    db: AsyncSession,
    run: ImportRun,
    result: PipelineResult,
) -> ImportRun:
    """Copy the pipeline outcome onto the audit row."""
    summary = result.context_summary
    run.status = str(result.status)
    run.detected_format = summary.get("detected_format")
    run.records_total = summary.get("records_total", 0)
    run.records_persisted = summary.get("records_persisted", 0)
    run.error_code = str(result.error_code) if result.error_code else None
    run.error_message = result.error
    run.step_results = [
        {k: v for k, v in step.items() if k != "metadata"} for step in result.step_results
    ]
    run.context_summary = summary
    run.completed_at = result.completed_at or datetime.now(timezone.utc)
    run.duration_ms = result.total_duration_ms
    await db.flush()
    return run


async def get_import_run(db: AsyncSession, run_id: uuid.UUID) -> ImportRun | None:
    return await db.get(ImportRun, run_id)


async def list_import_runs(
    db: AsyncSession,
    *,
    status: str | None = None,
    offset: int = 0,
    limit: int = 50,
) -> list[ImportRun]:
    """Most recent imports first."""
    stmt = select(ImportRun).order_by(desc(ImportRun.started_at))
    if status is not None:
        stmt = stmt.where(ImportRun.status == status.upper())
    stmt = stmt.offset(offset).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())
