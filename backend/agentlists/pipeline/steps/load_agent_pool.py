"""
LoadAgentPoolStep — snapshots the active agent list once per import.

The registry decides the order; distribution later takes the first N
of this snapshot as-is.
"""

from __future__ import annotations

from agentlists.core.logging import get_logger
from agentlists.pipeline.context import PipelineContext, StepResult
from agentlists.pipeline.errors import StepExecutionError
from agentlists.pipeline.step import PipelineStep
from agentlists.store.base import AgentRegistry

logger = get_logger(__name__)


class LoadAgentPoolStep(PipelineStep):
    name = "load_agent_pool"
    description = "Read the ordered list of active agents"

    def __init__(self, registry: AgentRegistry) -> None:
        self.registry = registry

    async def execute(self, ctx: PipelineContext) -> StepResult:
        started_at = self._now()

        try:
            ctx.worker_pool = list(await self.registry.list_active())
        except Exception as exc:
            raise StepExecutionError(
                f"Could not load agents: {exc}",
                execution_id=ctx.execution_id,
                step_name=self.name,
            ) from exc

        logger.info("Agent pool loaded", agents=len(ctx.worker_pool))
        return self._success(started_at, metadata={"agents": len(ctx.worker_pool)})
