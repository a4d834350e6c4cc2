"""
DetectFormatStep — resolves the upload format from the filename.

Rejects anything outside csv/xlsx/xls before a decoder sees the bytes.
"""

from __future__ import annotations

from agentlists.core.logging import get_logger
from agentlists.pipeline.context import PipelineContext, StepResult
from agentlists.pipeline.errors import UnsupportedFormatError
from agentlists.pipeline.step import PipelineStep
from agentlists.processing.format_detector import detect_format, extension_of

logger = get_logger(__name__)


class DetectFormatStep(PipelineStep):
    name = "detect_format"
    description = "Detect upload format from the file extension"

    async def execute(self, ctx: PipelineContext) -> StepResult:
        started_at = self._now()

        ctx.extension = extension_of(ctx.filename)
        try:
            ctx.detected_format = detect_format(ctx.filename)
        except UnsupportedFormatError as exc:
            exc.execution_id = ctx.execution_id
            exc.step_name = self.name
            logger.warning("Rejected upload format", filename=ctx.filename, extension=ctx.extension)
            raise

        return self._success(started_at, metadata={
            "extension": ctx.extension,
            "format": ctx.detected_format,
        })
