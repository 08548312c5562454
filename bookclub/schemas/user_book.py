"""UserBook Schemas — collection entries, rating updates and listings.

Invariants:
    - UserBookCreate: user_id, book_id strict non-zero integers; status non-blank
    - status is free text: "reading" / "completed" / "want-to-read" by convention only
    - rating on creation is not range-checked here; the store's CHECK constraint owns it
    - RatingUpdate.rating: strict integer in [1, 5]

Design Decisions:
    - strict=True on integer ids and rating: "5" or 5.0 are rejected like any
      other wrongly-typed JSON value
    - An id of 0 counts as missing; negative ids pass through to the store
"""

from pydantic import BaseModel, Field, field_validator


class UserBookCreate(BaseModel):
    """Adds a book to a user's collection."""
    user_id: int = Field(strict=True)
    book_id: int = Field(strict=True)
    status: str
    rating: int | None = Field(None, strict=True)
    review: str = ""
    progress: int = Field(0, strict=True)

    @field_validator("user_id", "book_id")
    @classmethod
    def reject_zero(cls, v: int) -> int:
        if v == 0:
            raise ValueError("is required")
        return v

    @field_validator("status")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cannot be empty or whitespace")
        return v


class UserBookResponse(UserBookCreate):
    """UserBook as stored, with its server-generated id."""
    id: int


class RatingUpdate(BaseModel):
    """Rating/review update for one collection entry."""
    rating: int = Field(ge=1, le=5, strict=True)
    review: str = ""


class UserBookDetails(BaseModel):
    """Collection entry joined with its book's catalogue fields."""
    id: int
    user_id: int
    book_id: int
    status: str
    rating: int | None = None
    review: str | None = None
    progress: int | None = None
    title: str
    author: str
    description: str | None = None
    isbn: str | None = None
    cover_url: str | None = None
