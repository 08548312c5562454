"""Book Club API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BookClubError → {"error": <message>} responses
    - CORS configured from settings (not hardcoded)
    - Startup is all-or-nothing: config, connection and schema must all succeed
      before app.state.gateway is set and traffic is served

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Gateway lives on app.state and reaches routes through get_gateway,
      so tests swap it with dependency_overrides
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from sqlalchemy import make_url, text
from sqlalchemy.exc import SQLAlchemyError

from bookclub import __version__
from bookclub.api.error_handlers import register_error_handlers
from bookclub.api.request_logging import register_request_logging
from bookclub.api.routes import books, health, user_books
from bookclub.config import Settings, get_settings
from bookclub.core.errors import DatabaseError, ResourceNotFoundError, StartupError
from bookclub.db.schema import create_schema
from bookclub.infrastructure.database import Gateway
from bookclub.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """Load settings, turning a bad environment into a fatal StartupError."""
    try:
        return get_settings()
    except ValidationError as e:
        raise StartupError(str(e), "config") from e


async def bootstrap(settings: Settings) -> Gateway:
    """Connect, verify and migrate. Returns a ready gateway or raises StartupError."""
    try:
        url = make_url(settings.sqlalchemy_url())
        logger.info(
            f"Database config: host={url.host} port={url.port} "
            f"user={url.username} dbname={url.database}",
        )
        gateway = Gateway.connect(
            settings.sqlalchemy_url(),
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    except (SQLAlchemyError, ValueError) as e:
        raise StartupError(str(e), "connection") from e

    try:
        try:
            await gateway.ping()
        except DatabaseError as e:
            raise StartupError(e.detail, "connection") from e
        logger.info("Database connection successful")

        try:
            row = await gateway.query_row(text("SELECT version()"))
            logger.info(f"Database server version: {row[0]}")
        except (DatabaseError, ResourceNotFoundError) as e:
            logger.warning(f"Could not read database server version: {e.message}")

        await create_schema(gateway.engine)
    except StartupError:
        await gateway.dispose()
        raise
    return gateway


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.gateway = await bootstrap(settings)
    logger.info("Book Club API started")
    yield
    logger.info("Book Club API shutting down")
    await app.state.gateway.dispose()
    app.state.gateway = None


app = FastAPI(title="Book Club API", version=__version__, lifespan=lifespan)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_request_logging(app)
register_error_handlers(app)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(books.router)
app.include_router(user_books.router)
