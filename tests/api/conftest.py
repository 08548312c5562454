"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the full schema
    - get_gateway dependency overridden to a Gateway around the test engine
    - broken_client points at a database that cannot be opened

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-only functions are exactly what /db-info tolerates missing)
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine

from bookclub.db.schema import create_schema
from bookclub.infrastructure.database import Gateway, get_gateway
from bookclub.main import app
from bookclub.models.user import User


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def gateway(test_engine):
    return Gateway(test_engine)


async def _client_for(gw: Gateway):
    app.dependency_overrides[get_gateway] = lambda: gw
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def client(gateway):
    """FastAPI test client with the gateway dependency overridden."""
    async for c in _client_for(gateway):
        yield c


@pytest.fixture
async def broken_client(tmp_path):
    """Client whose gateway cannot reach its database."""
    url = f"sqlite+aiosqlite:///{tmp_path}/missing-dir/bookclub.db"
    engine = create_async_engine(url)
    async for c in _client_for(Gateway(engine)):
        yield c
    await engine.dispose()


@pytest.fixture
async def seed_user(gateway):
    """Insert a reader so user_books rows have a real owner."""
    row = await gateway.query_row(
        insert(User)
        .values(username="reader", email="reader@example.com", password_hash="x")
        .returning(User.id)
    )
    return row.id


@pytest.fixture
async def seed_book(client):
    response = await client.post(
        "/books", json={"title": "Dune", "author": "Frank Herbert"},
    )
    return response.json()["book"]
