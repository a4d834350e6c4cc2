"""
Store interfaces — what the pipeline needs from persistence.

The pipeline depends only on these protocols; the SQLAlchemy
implementations live in store/sql.py and tests plug in in-memory ones.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

WorkerRef = Hashable


@dataclass(frozen=True)
class ContactItem:
    """One validated contact row bound to the agent it was assigned to."""

    first_name: str
    phone: str
    notes: str
    agent_id: WorkerRef
    # Set once the store has written the item
    id: Any = None
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "firstName": self.first_name,
            "phone": self.phone,
            "notes": self.notes,
            "agentId": str(self.agent_id),
        }
        if self.id is not None:
            data["id"] = str(self.id)
        if self.created_at is not None:
            data["createdAt"] = self.created_at.isoformat()
        return data


def as_text(value: Any) -> str:
    """Render a decoded cell as text; whole numbers lose the trailing .0"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def contact_item_from_record(record: dict[str, Any], agent_id: WorkerRef) -> ContactItem:
    """Build a ContactItem from a validated, normalized record."""
    return ContactItem(
        first_name=as_text(record["firstname"]),
        phone=as_text(record["phone"]),
        notes=as_text(record["notes"]),
        agent_id=agent_id,
    )


class AssignmentStore(Protocol):
    """Durable home of assigned contacts, queryable per agent."""

    async def create(self, item: ContactItem) -> Any:
        """Persist one item.  Raises StoreError when the write fails."""
        ...

    async def find_by_worker(self, agent_id: WorkerRef) -> list[ContactItem]:
        ...


class AgentRegistry(Protocol):
    """Source of the distribution pool."""

    async def list_active(self) -> list[WorkerRef]:
        """Active agent ids in a stable, explicit order."""
        ...
