"""
Processing Pipeline — runs one upload through the import flow.

    1. Open an audit row (when auditing is wired)
    2. Build the import flow against the store and agent registry
    3. Run the engine
    4. Close the audit row with the outcome

The engine never raises for a bad upload; the returned PipelineResult
carries the classified failure for the caller to report.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from agentlists.core.logging import get_logger
from agentlists.pipeline.engine import PipelineEngine, PipelineResult
from agentlists.pipeline.flow import import_flow
from agentlists.store.base import AgentRegistry, AssignmentStore

logger = get_logger(__name__)


class ImportAudit(Protocol):
    async def start(self, filename: str) -> Any:
        """Open an audit record; returns its id."""
        ...

    async def finish(self, run_id: Any, result: PipelineResult) -> None:
        ...


@dataclass
class ImportOutcome:
    import_id: Any
    result: PipelineResult


class ImportService:
    """Wires collaborators into the import flow for each upload."""

    def __init__(
        self,
        *,
        registry: AgentRegistry,
        store_factory: Callable[[Any], AssignmentStore],
        audit: ImportAudit | None = None,
        agent_count: int | None = None,
    ) -> None:
        self.registry = registry
        self.store_factory = store_factory
        self.audit = audit
        self.agent_count = agent_count

    async def import_file(self, filename: str, content: bytes) -> ImportOutcome:
        run_id = await self.audit.start(filename) if self.audit else None

        store = self.store_factory(run_id)
        engine = PipelineEngine(steps=import_flow(store, self.registry, self.agent_count))
        result = await engine.run(filename, content, import_run_id=run_id)

        if self.audit:
            await self.audit.finish(run_id, result)

        logger.info(
            "Upload processed",
            import_id=str(run_id) if run_id else None,
            status=result.status,
            error_code=result.error_code,
        )
        return ImportOutcome(import_id=run_id, result=result)
