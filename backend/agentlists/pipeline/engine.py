"""
PipelineEngine — runs the import steps for one upload, in order.

The engine owns the bookkeeping around each step: timing, structured
logs bound to the run, and turning a raised error into a classified
failure.  It stops at the first failed step and never lets an
exception escape ``run()``.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import structlog

from agentlists.core.constants import ErrorCode, PipelineStatus, StepStatus
from agentlists.pipeline.context import PipelineContext, StepResult
from agentlists.pipeline.errors import PipelineError, StoreError
from agentlists.pipeline.step import PipelineStep


@dataclass
class PipelineResult:
    """Outcome of one import, as reported to the caller and the audit row."""

    execution_id: str
    status: str                     # PipelineStatus value
    started_at: datetime | None = None
    completed_at: datetime | None = None
    total_duration_ms: int = 0
    steps_completed: int = 0
    total_steps: int = 0
    step_results: list[dict[str, Any]] = field(default_factory=list)
    context_summary: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    error_code: str | None = None
    error_details: dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.status == PipelineStatus.COMPLETED

    @property
    def records_persisted(self) -> int:
        return self.context_summary.get("records_persisted", 0)


def _elapsed_ms(started_at: datetime, completed_at: datetime) -> int:
    return int((completed_at - started_at).total_seconds() * 1000)


class PipelineEngine:
    """
    Usage::

        engine = PipelineEngine(steps=import_flow(store, registry))
        result = await engine.run("contacts.csv", data)
    """

    def __init__(self, steps: list[PipelineStep] | None = None) -> None:
        self.steps = steps or []
        self.logger = structlog.get_logger("pipeline.engine")

    async def run(
        self,
        filename: str,
        content: bytes,
        *,
        execution_id: str | None = None,
        import_run_id: Any = None,
    ) -> PipelineResult:
        """
        Import one uploaded file.

        Args:
            filename: Original filename; its extension picks the decoder.
            content: The uploaded bytes.
            execution_id: Run id for logs (a new UUID when omitted).
            import_run_id: Audit row id stamped on every saved contact.
        """
        ctx = PipelineContext(filename=filename, content=content, import_run_id=import_run_id)
        if execution_id:
            ctx.execution_id = execution_id

        log = self.logger.bind(execution_id=ctx.execution_id, filename=filename)
        log.info("Import started", size_bytes=len(content))

        if not self.steps:
            log.error("Import has no steps")
            now = datetime.now(timezone.utc)
            return PipelineResult(
                execution_id=ctx.execution_id,
                status=PipelineStatus.FAILED,
                started_at=now,
                completed_at=now,
                error="No import steps configured",
                error_code=ErrorCode.PIPELINE_ERROR,
            )

        result = await self.run_steps(ctx, self.steps)

        log.info(
            "Import finished",
            status=result.status,
            error_code=result.error_code,
            records_persisted=ctx.persisted_count,
            duration_ms=result.total_duration_ms,
        )
        return result

    async def run_steps(self, ctx: PipelineContext, steps: list[PipelineStep]) -> PipelineResult:
        """Run ``steps`` against an already-built context."""
        started_at = datetime.now(timezone.utc)
        ctx.total_steps = len(steps)
        log = self.logger.bind(execution_id=ctx.execution_id)

        failed: StepResult | None = None
        for index, step in enumerate(steps):
            step_log = log.bind(step_name=step.name, step_index=index + 1)
            step_log.debug(step.description or step.name)

            result = await self._execute(step, ctx, step_log)
            ctx.step_results.append(result)

            if result.status != StepStatus.COMPLETED:
                step_log.warning("Step failed", error=result.error, error_code=result.error_code)
                ctx.add_error(f"{step.name}: {result.error}")
                failed = result
                break

            step_log.info("Step completed", duration_ms=result.duration_ms, metadata=result.metadata)

        completed_at = datetime.now(timezone.utc)
        return PipelineResult(
            execution_id=ctx.execution_id,
            status=self._status(failed, ctx),
            started_at=started_at,
            completed_at=completed_at,
            total_duration_ms=_elapsed_ms(started_at, completed_at),
            steps_completed=sum(1 for r in ctx.step_results if r.status == StepStatus.COMPLETED),
            total_steps=len(steps),
            step_results=[r.to_dict() for r in ctx.step_results],
            context_summary=ctx.to_summary_dict(),
            error=failed.error if failed else None,
            error_code=failed.error_code if failed else None,
            error_details=dict(failed.details) if failed else {},
        )

    @staticmethod
    def _status(failed: StepResult | None, ctx: PipelineContext) -> PipelineStatus:
        if failed is None:
            return PipelineStatus.COMPLETED
        # Saved rows are never rolled back
        if failed.error_code == ErrorCode.STORE_ERROR and ctx.persisted_count > 0:
            return PipelineStatus.PARTIALLY_COMPLETED
        return PipelineStatus.FAILED

    async def _execute(
        self,
        step: PipelineStep,
        ctx: PipelineContext,
        log: structlog.stdlib.BoundLogger,
    ) -> StepResult:
        started_at = datetime.now(timezone.utc)
        try:
            return await step.execute(ctx)
        except PipelineError as exc:
            completed_at = datetime.now(timezone.utc)
            metadata: dict[str, Any] = {}
            if isinstance(exc, StoreError):
                metadata["persisted"] = exc.persisted
            return StepResult(
                step_name=step.name,
                status=StepStatus.FAILED,
                started_at=started_at,
                completed_at=completed_at,
                duration_ms=_elapsed_ms(started_at, completed_at),
                error=exc.message,
                error_code=exc.code,
                details=dict(exc.details),
                metadata=metadata,
            )
        except Exception as exc:
            log.exception("Unexpected error in step")
            completed_at = datetime.now(timezone.utc)
            return StepResult(
                step_name=step.name,
                status=StepStatus.FAILED,
                started_at=started_at,
                completed_at=completed_at,
                duration_ms=_elapsed_ms(started_at, completed_at),
                error=f"Unexpected error in {step.name}: {exc}",
                error_code=ErrorCode.PIPELINE_ERROR,
                metadata={"traceback": traceback.format_exc()},
            )
