"""SQLAlchemy-backed assignment store, agent registry and import audit."""

from __future__ import annotations

import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from agentlists.db.models.import_run import ImportRun
from agentlists.db.models.list_item import ListItem
from agentlists.pipeline.engine import PipelineResult
from agentlists.pipeline.errors import StoreError
from agentlists.repositories import agents as agent_repository
from agentlists.repositories import import_runs as import_run_repository
from agentlists.repositories import list_items as list_item_repository
from agentlists.store.base import ContactItem


class SqlAlchemyAssignmentStore:
    """
    Writes each ContactItem as its own savepointed insert.

    Commit belongs to the caller's session (the request's get_db), so
    rows written before a failure are committed with the request.
    """

    def __init__(self, db: AsyncSession, import_run_id: uuid.UUID | None = None) -> None:
        self.db = db
        self.import_run_id = import_run_id

    async def create(self, item: ContactItem) -> ListItem:
        try:
            return await list_item_repository.create_list_item(
                self.db,
                first_name=item.first_name,
                phone=item.phone,
                notes=item.notes,
                agent_id=item.agent_id,
                import_run_id=self.import_run_id,
            )
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not save contact for agent {item.agent_id}: {exc}") from exc

    async def find_by_worker(self, agent_id: uuid.UUID) -> list[ContactItem]:
        rows = await list_item_repository.list_items_for_agent(self.db, agent_id)
        return [
            ContactItem(
                first_name=row.first_name,
                phone=row.phone,
                notes=row.notes,
                agent_id=row.agent_id,
                id=row.id,
                created_at=row.created_at,
            )
            for row in rows
        ]


class SqlAlchemyAgentRegistry:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_active(self) -> list[uuid.UUID]:
        agents = await agent_repository.list_active_agents(self.db)
        return [agent.id for agent in agents]


class SqlAlchemyImportAudit:
    """Keeps one ImportRun row per upload in step with the pipeline outcome."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self._runs: dict[uuid.UUID, ImportRun] = {}

    async def start(self, filename: str) -> uuid.UUID:
        run = await import_run_repository.create_import_run(self.db, filename=filename)
        self._runs[run.id] = run
        return run.id

    async def finish(self, run_id: uuid.UUID, result: PipelineResult) -> None:
        run = self._runs.pop(run_id, None) or await import_run_repository.get_import_run(self.db, run_id)
        if run is None:
            return
        await import_run_repository.finish_import_run(self.db, run, result)
