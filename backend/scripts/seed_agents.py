"""
Seed sample agents for development.
Run: python -m scripts.seed_agents  (from backend/)
"""

import asyncio

from agentlists.db.session import async_session
from agentlists.repositories.agents import create_agent, get_agent_by_email


SEED_AGENTS = [
    {"name": "Agent One", "email": "a1@example.com", "mobile": "+10000000001"},
    {"name": "Agent Two", "email": "a2@example.com", "mobile": "+10000000002"},
    {"name": "Agent Three", "email": "a3@example.com", "mobile": "+10000000003"},
    {"name": "Agent Four", "email": "a4@example.com", "mobile": "+10000000004"},
    {"name": "Agent Five", "email": "a5@example.com", "mobile": "+10000000005"},
]


async def seed():
    """Insert seed agents, skipping any that already exist."""
    created = 0
    async with async_session() as session:
        for data in SEED_AGENTS:
            if await get_agent_by_email(session, data["email"]):
                continue
            agent = await create_agent(session, **data)
            created += 1
            print(f"  Created agent: {agent.email}")
        await session.commit()
    print(f"Seeded {created} agents.")


if __name__ == "__main__":
    asyncio.run(seed())
