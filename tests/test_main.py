"""Startup — settings loading and bootstrap sequence.

Tests:
    - bootstrap connects, creates the schema and returns a working gateway
    - Logged database target is the one actually dialled
    - Unreachable store or bad configuration → StartupError
"""

import logging

import pytest
from sqlalchemy import inspect

from bookclub.config import Settings, get_settings
from bookclub.core.errors import StartupError
from bookclub.main import app, bootstrap, lifespan, load_settings


@pytest.mark.asyncio
async def test_bootstrap_creates_schema(tmp_path):
    settings = Settings(
        _env_file=None, database_url=f"sqlite+aiosqlite:///{tmp_path}/club.db",
    )
    gateway = await bootstrap(settings)
    try:
        async with gateway.engine.connect() as conn:
            tables = await conn.run_sync(lambda c: inspect(c).get_table_names())
        assert "user_books" in tables
    finally:
        await gateway.dispose()


@pytest.mark.asyncio
async def test_bootstrap_logs_the_effective_database_target(tmp_path, caplog):
    settings = Settings(
        _env_file=None,
        db_host="db.internal",
        db_password="s3cret",
        database_url=f"sqlite+aiosqlite:///{tmp_path}/club.db",
    )
    with caplog.at_level(logging.INFO, logger="bookclub.main"):
        gateway = await bootstrap(settings)
    await gateway.dispose()
    assert f"dbname={tmp_path}/club.db" in caplog.text
    assert "db.internal" not in caplog.text
    assert "s3cret" not in caplog.text


@pytest.mark.asyncio
async def test_bootstrap_is_repeatable(tmp_path):
    settings = Settings(
        _env_file=None, database_url=f"sqlite+aiosqlite:///{tmp_path}/club.db",
    )
    for _ in range(2):
        gateway = await bootstrap(settings)
        await gateway.dispose()


@pytest.mark.asyncio
async def test_bootstrap_unreachable_store_is_fatal(tmp_path):
    settings = Settings(
        _env_file=None, database_url=f"sqlite+aiosqlite:///{tmp_path}/nope/club.db",
    )
    with pytest.raises(StartupError) as info:
        await bootstrap(settings)
    assert info.value.stage == "connection"


@pytest.mark.asyncio
async def test_bootstrap_invalid_url_is_fatal():
    settings = Settings(_env_file=None, database_url="nosuchdriver://x")
    with pytest.raises(StartupError):
        await bootstrap(settings)


def test_load_settings_wraps_invalid_environment(monkeypatch):
    monkeypatch.setenv("DB_PORT", "abc")
    get_settings.cache_clear()
    try:
        with pytest.raises(StartupError) as info:
            load_settings()
        assert info.value.stage == "config"
    finally:
        get_settings.cache_clear()


@pytest.mark.asyncio
async def test_lifespan_sets_and_clears_gateway():
    async with lifespan(app):
        assert app.state.gateway is not None
        assert await app.state.gateway.ping() is None
    assert app.state.gateway is None
