"""Schema Manager — idempotent "create table if not exists" bootstrap.

Invariants:
    - Every table in bookclub.models is created with its FKs, UNIQUE and CHECK constraints
    - Safe to run on every process start: existing tables are left untouched
    - Runs in one transaction; any failure is raised as StartupError (fatal)
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from bookclub import models  # noqa: F401  (populates Base.metadata)
from bookclub.core.errors import StartupError
from bookclub.db.base import Base

logger = logging.getLogger(__name__)


async def create_schema(engine: AsyncEngine) -> list[str]:
    """Create all missing tables. Returns the table names known to the schema."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Schema bootstrap failed: {e}")
        raise StartupError(str(e), "schema") from e
    tables = sorted(Base.metadata.tables)
    logger.info(f"Schema ready ({len(tables)} tables)")
    return tables
