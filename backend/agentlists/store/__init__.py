"""Assignment store and agent registry seams used by the import pipeline."""

from agentlists.store.base import (
    AgentRegistry,
    AssignmentStore,
    ContactItem,
    WorkerRef,
    contact_item_from_record,
)
from agentlists.store.sql import (
    SqlAlchemyAgentRegistry,
    SqlAlchemyAssignmentStore,
    SqlAlchemyImportAudit,
)

__all__ = [
    "AgentRegistry",
    "AssignmentStore",
    "ContactItem",
    "WorkerRef",
    "contact_item_from_record",
    "SqlAlchemyAgentRegistry",
    "SqlAlchemyAssignmentStore",
    "SqlAlchemyImportAudit",
]
