"""
ListItem repository — writes and per-agent reads of assigned contacts.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agentlists.db.models.list_item import ListItem


async def create_list_item(
    db: AsyncSession,
    *,
    first_name: str,
    phone: str,
    notes: str,
    agent_id: uuid.UUID,
    import_run_id: uuid.UUID | None = None,
) -> ListItem:
    """Insert one assigned contact row inside its own savepoint."""
    item = ListItem(
        first_name=first_name,
        phone=phone,
        notes=notes,
        agent_id=agent_id,
        import_run_id=import_run_id,
    )
    # A failed insert only unwinds this savepoint, earlier rows stay
    async with db.begin_nested():
        db.add(item)
        await db.flush()
    return item


async def list_items_for_agent(db: AsyncSession, agent_id: uuid.UUID) -> list[ListItem]:
    """All rows assigned to one agent in insertion order."""
    stmt = (
        select(ListItem)
        .where(ListItem.agent_id == agent_id)
        .order_by(ListItem.created_at.asc(), ListItem.id.asc())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())

