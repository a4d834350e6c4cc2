"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agentlists.core.config import settings
from agentlists.db.session import get_db as _get_db
from agentlists.processing.pipeline import ImportService
from agentlists.store.base import AssignmentStore
from agentlists.store.sql import (
    SqlAlchemyAgentRegistry,
    SqlAlchemyAssignmentStore,
    SqlAlchemyImportAudit,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session."""
    async for session in _get_db():
        yield session


def get_import_service(db: AsyncSession = Depends(get_db)) -> ImportService:
    """Import service bound to the request's session."""
    return ImportService(
        registry=SqlAlchemyAgentRegistry(db),
        store_factory=lambda run_id: SqlAlchemyAssignmentStore(db, import_run_id=run_id),
        audit=SqlAlchemyImportAudit(db),
        agent_count=settings.DISTRIBUTION_AGENT_COUNT,
    )


def get_assignment_store(db: AsyncSession = Depends(get_db)) -> AssignmentStore:
    """Read/write access to assigned contacts."""
    return SqlAlchemyAssignmentStore(db)
