"""
Declarative base for the agentlists tables, plus the column defaults
every model shares (UUID primary keys, timezone-aware timestamps).

One table per module under ``agentlists/db/models/``; each is imported
in the package ``__init__`` so Alembic sees the full metadata.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Deterministic index names, matching the hand-written migrations
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def generate_uuid() -> uuid.UUID:
    return uuid.uuid4()


def utcnow() -> datetime:
    """Aware UTC now; list_items ordering relies on per-row creation time."""
    return datetime.now(timezone.utc)
