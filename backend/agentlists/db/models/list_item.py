"""
ListItem — one imported contact row assigned to one agent.

Created once by a successful write during an import; never updated by
this service.  Field names exposed to other collaborators are
firstName / phone / notes / agentId.
"""

from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID

from agentlists.db.models.base import Base, generate_uuid, utcnow


class ListItem(Base):
    """One contact row assigned to an agent."""

    __tablename__ = "list_items"

    id = Column(UUID(as_uuid=True), primary_key=True, default=generate_uuid)

    # ── Contact ───────────────────────────────
    first_name = Column(String(255), nullable=False)
    phone = Column(String(64), nullable=False)
    notes = Column(Text, nullable=False)

    # ── Assignment ────────────────────────────
    agent_id = Column(UUID(as_uuid=True), ForeignKey("agents.id", ondelete="CASCADE"), nullable=False, index=True)
    import_run_id = Column(UUID(as_uuid=True), ForeignKey("import_runs.id", ondelete="SET NULL"), nullable=True, index=True)

    # ── Timestamps ────────────────────────────
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<ListItem {self.id} agent={self.agent_id} phone={self.phone}>"
