"""
Domain-specific exception hierarchy for the import pipeline.

All pipeline exceptions inherit from PipelineError so callers can
catch broadly or narrowly as needed.  Each exception carries structured
context (step name, execution ID, details) for logging and for the
API error body, plus a stable ``code`` from ErrorCode.
"""

from __future__ import annotations

from typing import Any

from agentlists.core.constants import ErrorCode


class PipelineError(Exception):
    """Base exception for all pipeline errors."""

    code: str = ErrorCode.PIPELINE_ERROR

    def __init__(
        self,
        message: str,
        *,
        execution_id: str | None = None,
        step_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.execution_id = execution_id
        self.step_name = step_name
        self.details = details or {}
        super().__init__(message)


class StepExecutionError(PipelineError):
    """A step failed during execution."""

    code = ErrorCode.STEP_FAILED


class UnsupportedFormatError(PipelineError):
    """The upload's extension is not in the allow-list."""

    code = ErrorCode.UNSUPPORTED_FORMAT

    def __init__(self, message: str, *, extension: str = "", **kwargs: Any) -> None:
        self.extension = extension
        super().__init__(message, **kwargs)
        self.details.setdefault("extension", extension)


class MalformedInputError(PipelineError):
    """The bytes could not be parsed as the declared format."""

    code = ErrorCode.MALFORMED_INPUT


class SchemaError(PipelineError):
    """At least one record lacks a required column; the batch is rejected."""

    code = ErrorCode.SCHEMA_ERROR

    def __init__(
        self,
        message: str,
        *,
        missing: list[str] | None = None,
        required: list[str] | None = None,
        row_indexes: list[int] | None = None,
        **kwargs: Any,
    ) -> None:
        self.missing = list(missing or [])
        self.required = list(required or [])
        self.row_indexes = list(row_indexes or [])
        super().__init__(message, **kwargs)
        self.details.update(
            missing=self.missing,
            required=self.required,
            row_indexes=self.row_indexes,
        )


class InsufficientWorkersError(PipelineError):
    """Fewer active agents exist than the distribution policy needs."""

    code = ErrorCode.INSUFFICIENT_WORKERS

    def __init__(
        self,
        message: str,
        *,
        required: int = 0,
        available: int = 0,
        **kwargs: Any,
    ) -> None:
        self.required = required
        self.available = available
        super().__init__(message, **kwargs)
        self.details.update(required=required, available=available)


class StoreError(PipelineError):
    """
    A single persistence write failed.

    ``persisted`` items of the same batch were already written and stay
    written; nothing is rolled back here.
    """

    code = ErrorCode.STORE_ERROR

    def __init__(
        self,
        message: str,
        *,
        persisted: int = 0,
        total: int = 0,
        **kwargs: Any,
    ) -> None:
        self.persisted = persisted
        self.total = total
        super().__init__(message, **kwargs)
        self.details.update(persisted=persisted, total=total)
