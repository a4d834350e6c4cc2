"""Shared constants and enums used across the application."""

from enum import StrEnum

# Size of the worker pool a single import is spread across
DEFAULT_AGENT_COUNT = 5

# Canonical (normalized) column names every record must carry
REQUIRED_FIELDS: tuple[str, ...] = ("firstname", "phone", "notes")

# Header labels shown to operators when a file is rejected
REQUIRED_FIELD_LABELS: dict[str, str] = {
    "firstname": "FirstName",
    "phone": "Phone",
    "notes": "Notes",
}


class PipelineStatus(StrEnum):
    """Overall status of an import run."""

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    PARTIALLY_COMPLETED = "PARTIALLY_COMPLETED"


class StepStatus(StrEnum):
    """Status of an individual pipeline step."""

    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class FileFormat(StrEnum):
    """Upload formats accepted by the tabular decoder."""

    CSV = "CSV"
    XLSX = "XLSX"
    XLS = "XLS"


class ErrorCode(StrEnum):
    """Machine-readable failure reasons surfaced to API callers."""

    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    MALFORMED_INPUT = "MALFORMED_INPUT"
    SCHEMA_ERROR = "SCHEMA_ERROR"
    INSUFFICIENT_WORKERS = "INSUFFICIENT_WORKERS"
    STORE_ERROR = "STORE_ERROR"
    STEP_FAILED = "STEP_FAILED"
    PIPELINE_ERROR = "PIPELINE_ERROR"
    NO_FILE = "NO_FILE"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
