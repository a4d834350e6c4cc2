"""
ImportRun — audit record, one row per upload attempt.

Tracks the file, the outcome, and how many rows actually reached the
store, so a partially written import is visible after the fact.
"""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID

from agentlists.db.models.base import Base, generate_uuid, utcnow


class ImportRun(Base):
    """One row per import attempt."""

    __tablename__ = "import_runs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=generate_uuid)

    # ── Upload ────────────────────────────────
    filename = Column(String(500), nullable=False)
    detected_format = Column(String(20), nullable=True)

    # ── Status / Counts ───────────────────────
    status = Column(String(50), nullable=False, default="PENDING", index=True)
    records_total = Column(Integer, default=0)
    records_persisted = Column(Integer, default=0)

    # ── Error ─────────────────────────────────
    error_code = Column(String(50), nullable=True)
    error_message = Column(Text, nullable=True)

    # ── Trace ─────────────────────────────────
    step_results = Column(JSONB, default=list)
    context_summary = Column(JSONB, default=dict)

    # ── Timing (UTC) ─────────────────────────
    started_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    duration_ms = Column(Integer, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<ImportRun {self.id} {self.filename} status={self.status} persisted={self.records_persisted}/{self.records_total}>"
