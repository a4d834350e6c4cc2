"""
NormalizeFieldsStep — canonical field names for every raw record.

Header matching becomes case- and whitespace-insensitive.  Colliding
headers resolve last-write-wins (see processing/normalizer.py).
"""

from __future__ import annotations

from agentlists.core.logging import get_logger
from agentlists.pipeline.context import PipelineContext, StepResult
from agentlists.pipeline.step import PipelineStep
from agentlists.processing.normalizer import normalize_records

logger = get_logger(__name__)


class NormalizeFieldsStep(PipelineStep):
    name = "normalize_fields"
    description = "Trim and lower-case column names"

    async def execute(self, ctx: PipelineContext) -> StepResult:
        started_at = self._now()

        ctx.normalized_records = normalize_records(ctx.raw_records)

        # Records that lost a column to a header collision
        collisions = sum(
            1 for raw, norm in zip(ctx.raw_records, ctx.normalized_records)
            if len(norm) < len(raw)
        )
        if collisions:
            logger.warning("Column names collided after normalization", records=collisions)

        return self._success(started_at, metadata={
            "records": len(ctx.normalized_records),
            "collisions": collisions,
        })
