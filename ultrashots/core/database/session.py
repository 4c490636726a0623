"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from ultrashots.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

# Create global engine and session factory
engine = create_engine(settings.database.url, echo=settings.database.echo)
async_session_maker = create_sessionmaker(engine)


async def init_db() -> None:
    """
    Initialize the database.

    Creates all tables defined in the ORM metadata.
    NOTE: In production, Alembic migrations should be used instead of this function.
    """
    await create_all(engine)
