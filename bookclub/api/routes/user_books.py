"""User Books — a reader's collection: add, list, rate, remove.

Invariants:
    - (user_id, book_id) uniqueness is enforced by the store; a duplicate is a 500
    - Update and delete report 404 when no row matched the id
    - Listing an unknown or empty user is 200 with an empty list, never 404
    - Store error text never reaches the client; it is logged by the gateway

Design Decisions:
    - user_id query parameter parsed by hand so a missing value and a
      malformed value get distinct messages
"""

import logging
import re

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import delete, func, insert, select, update

from bookclub.core.errors import (
    DatabaseError, InputValidationError, ResourceNotFoundError,
)
from bookclub.infrastructure.database import Gateway, get_gateway
from bookclub.models.book import Book
from bookclub.models.user_book import UserBook
from bookclub.schemas.user_book import (
    RatingUpdate, UserBookCreate, UserBookDetails, UserBookResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/user-books", tags=["user-books"])

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_user_id(raw: str | None) -> int:
    """Validate the user_id query parameter."""
    if not raw:
        raise InputValidationError(
            "user_id query parameter is required", "user_id",
        )
    if not _INTEGER.fullmatch(raw):
        raise InputValidationError("Invalid user_id", "user_id")
    return int(raw)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_user_book(
    body: UserBookCreate, gateway: Gateway = Depends(get_gateway),
):
    """Add a book to a user's collection."""
    stmt = (
        insert(UserBook)
        .values(**body.model_dump())
        .returning(UserBook.id)
    )
    try:
        row = await gateway.query_row(stmt)
    except DatabaseError as e:
        raise DatabaseError(
            "Failed to add book to user collection", "insert", e.detail,
        ) from e

    user_book = UserBookResponse(id=row.id, **body.model_dump())
    logger.info(
        f"Book {body.book_id} added to user {body.user_id}",
        extra={"user_book_id": user_book.id},
    )
    return {
        "message": "Book added to collection successfully",
        "user_book": user_book.model_dump(),
    }


@router.get("")
async def list_user_books(
    user_id: str | None = Query(None),
    gateway: Gateway = Depends(get_gateway),
):
    """All collection entries for a user, joined with book details."""
    uid = parse_user_id(user_id)
    stmt = (
        select(
            UserBook.id, UserBook.user_id, UserBook.book_id,
            UserBook.status, UserBook.rating, UserBook.review,
            UserBook.progress,
            Book.title, Book.author, Book.description, Book.isbn,
            Book.cover_url,
        )
        .join(Book, UserBook.book_id == Book.id)
        .where(UserBook.user_id == uid)
        .order_by(UserBook.id)
    )
    try:
        rows = await gateway.query_set(stmt)
    except DatabaseError as e:
        raise DatabaseError("Failed to retrieve books", "select", e.detail) from e

    books = [
        UserBookDetails.model_validate(dict(row._mapping)).model_dump()
        for row in rows
    ]
    return {"user_id": uid, "books": books, "count": len(books)}


@router.put("/{user_book_id}/rating")
async def update_rating(
    user_book_id: int,
    body: RatingUpdate,
    gateway: Gateway = Depends(get_gateway),
):
    """Set rating and review; refreshes updated_at."""
    stmt = (
        update(UserBook)
        .where(UserBook.id == user_book_id)
        .values(rating=body.rating, review=body.review, updated_at=func.now())
    )
    try:
        affected = await gateway.execute(stmt)
    except DatabaseError as e:
        raise DatabaseError("Failed to update rating", "update", e.detail) from e

    if affected == 0:
        raise ResourceNotFoundError("User book", user_book_id)
    return {
        "message": "Rating updated successfully",
        "rating": body.rating,
        "review": body.review,
    }


@router.delete("/{user_book_id}")
async def remove_user_book(
    user_book_id: int, gateway: Gateway = Depends(get_gateway),
):
    """Remove a book from a user's collection."""
    stmt = delete(UserBook).where(UserBook.id == user_book_id)
    try:
        affected = await gateway.execute(stmt)
    except DatabaseError as e:
        raise DatabaseError("Failed to remove book", "delete", e.detail) from e

    if affected == 0:
        raise ResourceNotFoundError("User book", user_book_id)
    logger.info("User book removed", extra={"user_book_id": user_book_id})
    return {"message": "Book removed from collection successfully"}
