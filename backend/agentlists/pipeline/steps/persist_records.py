"""
PersistRecordsStep — writes every assignment to the store, one by one.

The only step with side effects.  Writes go worker by worker in the
order the partitioner produced.  A failed write stops the loop and is
reported with how many rows already made it; those rows are not
rolled back.
"""

from __future__ import annotations

from agentlists.core.logging import get_logger
from agentlists.pipeline.context import PipelineContext, StepResult
from agentlists.pipeline.errors import StepExecutionError, StoreError
from agentlists.pipeline.step import PipelineStep
from agentlists.store.base import AssignmentStore, contact_item_from_record

logger = get_logger(__name__)


class PersistRecordsStep(PipelineStep):
    name = "persist_records"
    description = "Save assigned contacts"

    def __init__(self, store: AssignmentStore) -> None:
        self.store = store

    async def execute(self, ctx: PipelineContext) -> StepResult:
        started_at = self._now()

        batch = ctx.distribution
        if batch is None:
            raise StepExecutionError(
                "Nothing to persist: records were not distributed",
                execution_id=ctx.execution_id,
                step_name=self.name,
            )

        total = batch.total
        for agent_id, record in batch.assignments():
            item = contact_item_from_record(record, agent_id)
            try:
                saved = await self.store.create(item)
            except Exception as exc:
                logger.error(
                    "Contact write failed, import incomplete",
                    agent_id=str(agent_id),
                    persisted=ctx.persisted_count,
                    total=total,
                    error=str(exc),
                )
                reason = exc.message if isinstance(exc, StoreError) else str(exc)
                raise StoreError(
                    f"Import incomplete: saved {ctx.persisted_count} of {total} contacts. {reason}",
                    persisted=ctx.persisted_count,
                    total=total,
                    execution_id=ctx.execution_id,
                    step_name=self.name,
                ) from exc

            ctx.persisted_count += 1
            ctx.persisted_ids.append(getattr(saved, "id", None))

        logger.info("Contacts persisted", persisted=ctx.persisted_count)
        return self._success(started_at, metadata={"persisted": ctx.persisted_count})
