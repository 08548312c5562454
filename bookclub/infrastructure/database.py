"""Persistence Gateway — async connection pool with query/exec/row-scan primitives.

Invariants:
    - One Gateway owns one AsyncEngine (one pool) for the process
    - Every call holds a pooled connection for exactly one statement and releases it
    - Writes run in their own transaction: committed on success, rolled back on error
    - All SQLAlchemy / socket exceptions mapped to DatabaseError (core/errors.py)
    - query_row raises ResourceNotFoundError on zero rows; query_set never does

Design Decisions:
    - Gateway is constructed at startup and injected via app.state + get_gateway
      (no module-level singleton); tests wrap their own engine
    - Core statements over ORM sessions: each handler maps to one SQL statement,
      there is no unit of work to track
    - No retries: a transient store error surfaces immediately
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import Request
from sqlalchemy import Row, make_url, text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.sql.expression import Executable

from bookclub.core.errors import DatabaseError, ResourceNotFoundError

logger = logging.getLogger(__name__)


class Gateway:
    """Query/exec/row-scan primitives over a single async connection pool."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def connect(
        cls, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ) -> "Gateway":
        """Build a gateway with a fresh pool for the given URL."""
        options = {"pool_pre_ping": True, "pool_recycle": 3600}
        # SQLite dialects pick their own pool class, which takes no sizing
        if make_url(database_url).get_backend_name() != "sqlite":
            options.update(pool_size=pool_size, max_overflow=max_overflow)
        engine = create_async_engine(database_url, **options)
        return cls(engine)

    @asynccontextmanager
    async def _transaction(
        self, operation: str,
    ) -> AsyncGenerator[AsyncConnection, None]:
        """Provide a connection inside a transaction, mapping store errors."""
        try:
            async with self.engine.begin() as conn:
                yield conn
        except IntegrityError as e:
            logger.error(f"DB integrity error: {e}", extra={"operation": operation})
            raise DatabaseError(
                "Integrity constraint violated", operation, str(e.orig),
            ) from e
        except OperationalError as e:
            logger.error(f"DB operational error: {e}", extra={"operation": operation})
            raise DatabaseError(
                "Connection or operational error", operation, str(e.orig),
            ) from e
        except DBAPIError as e:
            logger.error(f"DB driver error: {e}", extra={"operation": operation})
            raise DatabaseError(
                "Database driver error", operation, str(e.orig),
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"SQLAlchemy error: {e}", extra={"operation": operation})
            raise DatabaseError("Database operation failed", operation, str(e)) from e
        except OSError as e:
            logger.error(f"DB connection error: {e}", extra={"operation": operation})
            raise DatabaseError("Database unreachable", operation, str(e)) from e

    async def ping(self) -> None:
        """Liveness check. Raises DatabaseError carrying the store's error text."""
        async with self._transaction("ping") as conn:
            await conn.execute(text("SELECT 1"))

    async def execute(
        self, statement: Executable, params: dict[str, Any] | None = None,
    ) -> int:
        """Run an insert/update/delete. Returns the number of rows affected."""
        async with self._transaction("execute") as conn:
            result = await conn.execute(statement, params)
            return result.rowcount

    async def query_row(
        self, statement: Executable, params: dict[str, Any] | None = None,
    ) -> Row:
        """Return the first row of the result (committed, so RETURNING works)."""
        async with self._transaction("query_row") as conn:
            result = await conn.execute(statement, params)
            row = result.first()
        if row is None:
            raise ResourceNotFoundError("Row")
        return row

    async def query_set(
        self, statement: Executable, params: dict[str, Any] | None = None,
    ) -> list[Row]:
        """Return all rows in result order. Zero rows is an empty list."""
        async with self._transaction("query_set") as conn:
            result = await conn.execute(statement, params)
            return list(result.all())

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_gateway(request: Request) -> Gateway:
    """FastAPI dependency for the gateway built at startup."""
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        raise RuntimeError("Database not initialized")
    return gateway
