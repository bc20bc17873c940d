"""
Database table creation.

Creates all tables defined in ORM models using SQLAlchemy metadata.
Called from the application lifespan; also runnable as a script.

Dependencies: sqlalchemy, interview_coach.boundary.db
System role: Database schema initialization

Usage:
    python -m interview_coach.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from interview_coach.boundary.db.base import Base
from interview_coach.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from interview_coach.boundary.db.models import (  # noqa: F401
    AnalysisJobModel,
    AnalysisReportModel,
    InterviewSessionModel,
    MessageModel,
    UserModel,
)

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: CREATE TABLE is only issued for missing tables.

    Args:
        engine: Engine to use (defaults to the configured application engine)
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Engine to use (defaults to the configured application engine)
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


if __name__ == "__main__":
    asyncio.run(create_all_tables())
