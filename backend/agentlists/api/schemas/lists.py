"""List upload / read response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AgentAllocation(BaseModel):
    """How many contacts one agent received from an import."""

    agent_id: str
    count: int = Field(..., ge=0)


class UploadResponse(BaseModel):
    """Successful import."""

    message: str
    import_id: str | None = None
    records: int = Field(..., ge=0)
    agents: list[AgentAllocation]


class ImportErrorResponse(BaseModel):
    """
    Failed import.

    ``imported`` is False when nothing was written and True when a
    store failure left part of the file saved.
    """

    message: str
    error_code: str
    imported: bool = False
    import_id: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)


class ListItemResponse(BaseModel):
    """Persisted contact shape shared with other collaborators."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    first_name: str = Field(..., alias="firstName")
    phone: str
    notes: str
    agent_id: str = Field(..., alias="agentId")
    created_at: datetime | None = Field(None, alias="createdAt")


class ImportRunResponse(BaseModel):
    """Audit view of one upload attempt."""

    id: str
    filename: str
    detected_format: str | None
    status: str
    records_total: int | None
    records_persisted: int | None
    error_code: str | None
    error_message: str | None
    started_at: datetime | None
    completed_at: datetime | None
    duration_ms: int | None
