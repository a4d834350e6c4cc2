"""
Base class for import steps.

A step reads what earlier steps left on the PipelineContext, writes its
own output back, and returns a StepResult.  Failures are raised as
PipelineError subclasses; the engine turns them into failed results.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

from agentlists.core.constants import StepStatus
from agentlists.pipeline.context import PipelineContext, StepResult


class PipelineStep(ABC):
    name: str = "unnamed_step"
    description: str = ""

    @abstractmethod
    async def execute(self, ctx: PipelineContext) -> StepResult:
        ...

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _success(self, started_at: datetime, metadata: dict[str, Any] | None = None) -> StepResult:
        completed_at = self._now()
        return StepResult(
            step_name=self.name,
            status=StepStatus.COMPLETED,
            started_at=started_at,
            completed_at=completed_at,
            duration_ms=int((completed_at - started_at).total_seconds() * 1000),
            metadata=metadata or {},
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
