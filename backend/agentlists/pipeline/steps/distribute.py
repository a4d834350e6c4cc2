"""
DistributeStep — round-robin assignment of validated records.

Pure: computes ctx.distribution from ctx.validated_records and the
agent pool snapshot without touching storage.
"""

from __future__ import annotations

from agentlists.core.logging import get_logger
from agentlists.pipeline.context import PipelineContext, StepResult
from agentlists.pipeline.errors import InsufficientWorkersError
from agentlists.pipeline.step import PipelineStep
from agentlists.distribution.partitioner import distribute

logger = get_logger(__name__)


class DistributeStep(PipelineStep):
    name = "distribute"
    description = "Assign records to agents round-robin"

    def __init__(self, agent_count: int) -> None:
        self.agent_count = agent_count

    async def execute(self, ctx: PipelineContext) -> StepResult:
        started_at = self._now()

        try:
            ctx.distribution = distribute(ctx.validated_records, ctx.worker_pool, self.agent_count)
        except InsufficientWorkersError as exc:
            exc.execution_id = ctx.execution_id
            exc.step_name = self.name
            logger.warning(
                "Not enough agents to distribute",
                required=exc.required,
                available=exc.available,
            )
            raise

        counts = [len(group) for group in ctx.distribution.groups]
        return self._success(started_at, metadata={
            "agents": self.agent_count,
            "records": ctx.distribution.total,
            "per_agent": counts,
        })
