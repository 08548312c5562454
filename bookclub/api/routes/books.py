"""Books — catalogue creation."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import insert

from bookclub.core.errors import DatabaseError
from bookclub.infrastructure.database import Gateway, get_gateway
from bookclub.models.book import Book
from bookclub.schemas.book import BookCreate, BookResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["books"])


@router.post("/books", status_code=status.HTTP_201_CREATED)
async def add_book(body: BookCreate, gateway: Gateway = Depends(get_gateway)):
    """Insert a book and echo it back with its new id."""
    stmt = (
        insert(Book)
        .values(**body.model_dump())
        .returning(Book.id)
    )
    try:
        row = await gateway.query_row(stmt)
    except DatabaseError as e:
        raise DatabaseError("Failed to add book", "insert", e.detail) from e

    book = BookResponse(id=row.id, **body.model_dump())
    logger.info(f"Book {book.id} added")
    return {"message": "Book added successfully", "book": book.model_dump()}
