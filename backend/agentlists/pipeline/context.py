"""
PipelineContext — mutable state object carried through every step.

This is the single source of truth for one import run.  Each step
reads from and writes to the context.  The engine serialises the
final context summary into the ImportRun audit row.

Populated progressively:
    detect_format     → extension, detected_format
    extract_data      → raw_records
    normalize_fields  → normalized_records
    validate_schema   → validated_records
    load_agent_pool   → worker_pool
    distribute        → distribution
    persist_records   → persisted_count, persisted_ids
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from agentlists.distribution.partitioner import DistributionBatch


# ═══════════════════════════════════════════════════════════
#  StepResult
# ═══════════════════════════════════════════════════════════

@dataclass
class StepResult:
    """Outcome of a single pipeline step execution."""

    step_name: str
    status: str                     # StepStatus value
    started_at: datetime | None = None
    completed_at: datetime | None = None
    duration_ms: int = 0
    error: str | None = None
    error_code: str | None = None   # ErrorCode value when failed
    details: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialise for JSON storage."""
        return {
            "step_name": self.step_name,
            "status": self.status,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "duration_ms": self.duration_ms,
            "error": self.error,
            "error_code": self.error_code,
            "details": self.details,
            "metadata": self.metadata,
        }


# ═══════════════════════════════════════════════════════════
#  PipelineContext
# ═══════════════════════════════════════════════════════════

@dataclass
class PipelineContext:
    """Carries all state between import steps."""

    # ─── Upload (set at init) ──────────────────────────
    filename: str
    content: bytes = field(default=b"", repr=False)
    execution_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    import_run_id: uuid.UUID | None = None

    # ─── Format (populated by detect_format) ───────────
    extension: str | None = None
    detected_format: str | None = None

    # ─── Records (populated stage by stage) ────────────
    raw_records: list[dict[str, Any]] = field(default_factory=list)
    normalized_records: list[dict[str, Any]] = field(default_factory=list)
    validated_records: list[dict[str, Any]] = field(default_factory=list)

    # ─── Distribution ──────────────────────────────────
    # Snapshot of the ordered active-agent list, read once per run
    worker_pool: list[Any] = field(default_factory=list)
    distribution: DistributionBatch | None = None

    # ─── Persistence ───────────────────────────────────
    persisted_count: int = 0
    persisted_ids: list[Any] = field(default_factory=list)

    # ─── Run bookkeeping (engine-owned) ────────────────
    total_steps: int = 0
    step_results: list[StepResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    # ─── Helpers ───────────────────────────────────────

    @property
    def records_total(self) -> int:
        """Number of records handed to persistence (0 before distribution)."""
        if self.distribution is None:
            return 0
        return self.distribution.total

    def add_error(self, error: str) -> None:
        """Record an error message for the run summary."""
        self.errors.append(error)

    def to_summary_dict(self) -> dict[str, Any]:
        """Compact summary for logging / DB storage."""
        summary: dict[str, Any] = {
            "execution_id": self.execution_id,
            "filename": self.filename,
            "size_bytes": len(self.content),
            "detected_format": self.detected_format,
            "records_extracted": len(self.raw_records),
            "records_validated": len(self.validated_records),
            "agents_available": len(self.worker_pool),
            "records_total": self.records_total,
            "records_persisted": self.persisted_count,
            "steps_completed": len(self.step_results),
            "total_steps": self.total_steps,
            "errors": self.errors,
        }
        if self.distribution is not None:
            summary["per_agent"] = {
                str(worker): count
                for worker, count in self.distribution.counts().items()
            }
        return summary
