"""UserBook ORM — one reader's relationship to one book.

Invariants:
    - (user_id, book_id) is unique: a book appears at most once per collection
    - rating, when present, is between 1 and 5 (CHECK constraint)
    - status is "reading", "completed" or "want-to-read" by convention only;
      the data layer does not enforce it
    - updated_at is refreshed explicitly by the rating update statement

Design Decisions:
    - Constraints live in the table definition so the store rejects bad rows
      atomically, regardless of which request wrote them
"""

from datetime import datetime

from sqlalchemy import (
    Integer, String, Text, DateTime, ForeignKey,
    CheckConstraint, UniqueConstraint, func, text,
)
from sqlalchemy.orm import Mapped, mapped_column

from bookclub.db.base import Base


class UserBook(Base):
    """UserBook entity — reading status, rating, review and progress."""
    __tablename__ = "user_books"
    __table_args__ = (
        UniqueConstraint("user_id", "book_id", name="uq_user_books_user_book"),
        CheckConstraint(
            "rating >= 1 AND rating <= 5", name="ck_user_books_rating_range",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True,
    )
    book_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("books.id"), nullable=True,
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    review: Mapped[str | None] = mapped_column(Text, nullable=True)
    progress: Mapped[int | None] = mapped_column(
        Integer, nullable=True, server_default=text("0"),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(),
    )
