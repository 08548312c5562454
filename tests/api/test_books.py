"""Book creation route.

Tests:
    - Valid payload → 201 with a positive id and the stored field values
    - Missing/blank title or author → 400 with the {"error": ...} envelope
    - Store failure → 500 with a generic message
"""

import pytest
from sqlalchemy import select

from bookclub.models.book import Book


@pytest.mark.asyncio
async def test_add_book_returns_created_book(client):
    response = await client.post(
        "/books",
        json={
            "title": "Dune",
            "author": "Herbert",
            "description": "Spice",
            "isbn": "9780441013593",
            "cover_url": "https://covers.example/dune.jpg",
        },
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Book added successfully"
    assert body["book"] == {
        "id": 1,
        "title": "Dune",
        "author": "Herbert",
        "description": "Spice",
        "isbn": "9780441013593",
        "cover_url": "https://covers.example/dune.jpg",
    }


@pytest.mark.asyncio
async def test_add_book_persists_fields(client, gateway):
    response = await client.post(
        "/books", json={"title": "Emma", "author": "Austen"},
    )
    book_id = response.json()["book"]["id"]
    row = await gateway.query_row(select(Book).where(Book.id == book_id))
    assert row.title == "Emma"
    assert row.author == "Austen"
    assert row.description == ""
    assert row.created_at is not None


@pytest.mark.asyncio
async def test_add_book_ids_increase(client):
    first = await client.post("/books", json={"title": "A", "author": "X"})
    second = await client.post("/books", json={"title": "B", "author": "Y"})
    assert second.json()["book"]["id"] > first.json()["book"]["id"] > 0


@pytest.mark.parametrize(
    "payload",
    [
        {"author": "Herbert"},
        {"title": "Dune"},
        {"title": "", "author": "Herbert"},
        {"title": "Dune", "author": "   "},
    ],
)
@pytest.mark.asyncio
async def test_add_book_rejects_missing_title_or_author(client, payload):
    response = await client.post("/books", json=payload)
    assert response.status_code == 400
    assert set(response.json()) == {"error"}


@pytest.mark.asyncio
async def test_add_book_rejects_malformed_json(client):
    response = await client.post(
        "/books", content=b"{not json", headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_add_book_store_failure_is_generic_500(broken_client):
    response = await broken_client.post(
        "/books", json={"title": "Dune", "author": "Herbert"},
    )
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to add book"}
