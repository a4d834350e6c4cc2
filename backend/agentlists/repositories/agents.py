"""
Agent repository — read access to the worker registry plus the
create helper used by the seed script.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agentlists.db.models.agent import Agent


async def create_agent(
    db: AsyncSession,
    *,
    name: str,
    email: str,
    mobile: str = "",
) -> Agent:
    """Create a new active agent."""
    agent = Agent(
        name=name.strip(),
        email=email.lower().strip(),
        mobile=mobile.strip(),
    )
    db.add(agent)
    await db.flush()
    return agent



async def get_agent_by_email(db: AsyncSession, email: str) -> Agent | None:
    """Fetch an agent by email address (case-insensitive)."""
    stmt = select(Agent).where(Agent.email == email.lower().strip())
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def list_active_agents(db: AsyncSession) -> list[Agent]:
    """
    Active agents in distribution order: oldest first, id as tie-break.

    This ordering decides which agents make up the pool, so it must
    stay stable across calls.
    """
    stmt = (
        select(Agent)
        .where(Agent.is_active.is_(True))
        .order_by(Agent.created_at.asc(), Agent.id.asc())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())
