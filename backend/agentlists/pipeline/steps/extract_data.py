"""
ExtractDataStep — decodes the whole upload into raw records.

Runs the Tabular Decoder once over the full buffer and stores the
result in ctx.raw_records.
"""

from __future__ import annotations

from agentlists.core.logging import get_logger
from agentlists.pipeline.context import PipelineContext, StepResult
from agentlists.pipeline.errors import PipelineError, StepExecutionError
from agentlists.pipeline.step import PipelineStep
from agentlists.processing.decoder import decode

logger = get_logger(__name__)


class ExtractDataStep(PipelineStep):
    name = "extract_data"
    description = "Decode the uploaded file into raw records"

    async def execute(self, ctx: PipelineContext) -> StepResult:
        started_at = self._now()

        try:
            ctx.raw_records = decode(ctx.content, ctx.extension or "")
        except PipelineError as exc:
            exc.execution_id = ctx.execution_id
            exc.step_name = self.name
            raise
        except Exception as exc:
            raise StepExecutionError(
                f"Extraction failed: {exc}",
                execution_id=ctx.execution_id,
                step_name=self.name,
            ) from exc

        if not ctx.raw_records:
            logger.warning("Upload contained no data rows", filename=ctx.filename)

        columns = sorted({key for record in ctx.raw_records for key in record})
        return self._success(started_at, metadata={
            "format": ctx.detected_format,
            "records": len(ctx.raw_records),
            "columns": columns,
        })
