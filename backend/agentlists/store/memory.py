"""
In-memory store and registry.

Used by the local demo script and the test suite; nothing is durable.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime, timezone

from agentlists.pipeline.errors import StoreError
from agentlists.store.base import ContactItem, WorkerRef


class InMemoryAssignmentStore:
    """
    Append-only list of written items.

    ``fail_after`` makes the store refuse every write after that many
    successful ones, to exercise partial imports.
    """

    def __init__(self, fail_after: int | None = None) -> None:
        self.items: list[ContactItem] = []
        self.fail_after = fail_after

    async def create(self, item: ContactItem) -> ContactItem:
        if self.fail_after is not None and len(self.items) >= self.fail_after:
            raise StoreError(f"Write refused after {self.fail_after} items")
        saved = replace(item, id=uuid.uuid4(), created_at=datetime.now(timezone.utc))
        self.items.append(saved)
        return saved

    async def find_by_worker(self, agent_id: WorkerRef) -> list[ContactItem]:
        return [item for item in self.items if item.agent_id == agent_id]


class StaticAgentRegistry:
    """Fixed, already-ordered agent list."""

    def __init__(self, agents: Iterable[WorkerRef]) -> None:
        self.agents = list(agents)

    async def list_active(self) -> list[WorkerRef]:
        return list(self.agents)
