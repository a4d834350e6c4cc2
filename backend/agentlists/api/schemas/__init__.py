"""API schema package."""

from agentlists.api.schemas.lists import (
    AgentAllocation,
    ImportErrorResponse,
    ImportRunResponse,
    ListItemResponse,
    UploadResponse,
)

__all__ = [
    "AgentAllocation",
    "ImportErrorResponse",
    "ImportRunResponse",
    "ListItemResponse",
    "UploadResponse",
]
