"""
Import flow definition.

Flow:
    Detect → Extract → Normalize → Validate → Load pool → Distribute → Persist

Steps 1–6 never write.  Only persist_records touches the store, and it
runs only once every earlier step has passed.
"""

from __future__ import annotations

from agentlists.core.config import settings
from agentlists.pipeline.step import PipelineStep
from agentlists.pipeline.steps.detect_format import DetectFormatStep
from agentlists.pipeline.steps.distribute import DistributeStep
from agentlists.pipeline.steps.extract_data import ExtractDataStep
from agentlists.pipeline.steps.load_agent_pool import LoadAgentPoolStep
from agentlists.pipeline.steps.normalize_fields import NormalizeFieldsStep
from agentlists.pipeline.steps.persist_records import PersistRecordsStep
from agentlists.pipeline.steps.validate_schema import ValidateSchemaStep
from agentlists.store.base import AgentRegistry, AssignmentStore


def import_flow(
    store: AssignmentStore,
    registry: AgentRegistry,
    agent_count: int | None = None,
) -> list[PipelineStep]:
    """Ordered steps for one upload, wired to the given collaborators."""
    return [
        DetectFormatStep(),
        ExtractDataStep(),
        NormalizeFieldsStep(),
        ValidateSchemaStep(),
        LoadAgentPoolStep(registry),
        DistributeStep(agent_count if agent_count is not None else settings.DISTRIBUTION_AGENT_COUNT),
        PersistRecordsStep(store),
    ]
