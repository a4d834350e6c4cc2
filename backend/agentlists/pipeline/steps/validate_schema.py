"""
ValidateSchemaStep — all-or-nothing required column check.

Every normalized record must carry a non-empty firstname, phone and
notes.  One bad record rejects the whole batch; nothing downstream runs.
"""

from __future__ import annotations

from agentlists.core.logging import get_logger
from agentlists.pipeline.context import PipelineContext, StepResult
from agentlists.pipeline.errors import SchemaError
from agentlists.pipeline.step import PipelineStep
from agentlists.validation.schema_validator import validate_records

logger = get_logger(__name__)


class ValidateSchemaStep(PipelineStep):
    name = "validate_schema"
    description = "Validate required columns (FirstName, Phone, Notes)"

    async def execute(self, ctx: PipelineContext) -> StepResult:
        started_at = self._now()

        try:
            ctx.validated_records = validate_records(ctx.normalized_records)
        except SchemaError as exc:
            exc.execution_id = ctx.execution_id
            exc.step_name = self.name
            logger.warning(
                "Schema validation failed",
                total=len(ctx.normalized_records),
                missing=exc.missing,
                row_indexes=exc.row_indexes,
            )
            raise

        logger.info("Schema validation passed", total=len(ctx.validated_records))
        return self._success(started_at, metadata={"validated": len(ctx.validated_records)})
