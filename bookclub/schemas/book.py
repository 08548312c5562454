"""Book Schemas — catalogue entry creation and response.

Invariants:
    - BookCreate.title / author: required, non-blank, stored as sent
    - description, isbn, cover_url default to ""
"""

from pydantic import BaseModel, field_validator


class BookCreate(BaseModel):
    """Book creation — title and author are mandatory."""
    title: str
    author: str
    description: str = ""
    isbn: str = ""
    cover_url: str = ""

    @field_validator("title", "author")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cannot be empty or whitespace")
        return v


class BookResponse(BookCreate):
    """Book as stored, with its server-generated id."""
    id: int
