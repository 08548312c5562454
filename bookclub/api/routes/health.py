"""Health & Diagnostics — liveness ping and database info endpoints.

Invariants:
    - GET /ping returns 200 when the store answers, 500 with the store's error text otherwise
    - GET /db-info always returns 200; a failing query leaves its field at "" / 0

Design Decisions:
    - /db-info is deliberately permissive: it is a diagnostic page, partial
      information beats no information
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from bookclub.core.errors import DatabaseError, ResourceNotFoundError
from bookclub.infrastructure.database import Gateway, get_gateway

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

DB_INFO_QUERIES = {
    "version": ("SELECT version()", ""),
    "database": ("SELECT current_database()", ""),
    "user": ("SELECT current_user", ""),
    "tables_count": (
        "SELECT COUNT(*) FROM information_schema.tables "
        "WHERE table_schema = 'public'",
        0,
    ),
}


@router.get("/ping")
async def ping(gateway: Gateway = Depends(get_gateway)):
    """Liveness probe including database connectivity."""
    try:
        await gateway.ping()
    except DatabaseError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": "pong",
                "db_status": "disconnected",
                "error": e.detail,
            },
        )
    return {"message": "pong", "db_status": "connected"}


@router.get("/db-info")
async def db_info(gateway: Gateway = Depends(get_gateway)):
    """Server version, database, user and public table count."""
    info: dict[str, Any] = {}
    for field, (sql, default) in DB_INFO_QUERIES.items():
        info[field] = default
        try:
            row = await gateway.query_row(text(sql))
        except (DatabaseError, ResourceNotFoundError) as e:
            logger.warning(f"db-info: {field} unavailable: {e.message}")
            continue
        if row[0] is not None:
            info[field] = type(default)(row[0])
    return info
