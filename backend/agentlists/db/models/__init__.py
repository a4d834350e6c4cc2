"""
Models package — re-exports Base and all models.

Import models here so Alembic's `target_metadata = Base.metadata`
picks up every table automatically.

When adding a new model:
    1. Create `agentlists/db/models/<table_name>.py`
    2. Import it here
"""

from agentlists.db.models.base import Base
from agentlists.db.models.agent import Agent
from agentlists.db.models.import_run import ImportRun
from agentlists.db.models.list_item import ListItem

__all__ = [
    "Base",
    "Agent",
    "ImportRun",
    "ListItem",
]
