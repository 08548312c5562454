"""ClubBook ORM — a book scheduled for a club.

Invariants:
    - status is "current", "previous" or "upcoming" by convention
"""

from datetime import date, datetime

from sqlalchemy import Integer, String, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column

from bookclub.db.base import Base


class ClubBook(Base):
    __tablename__ = "club_books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    club_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("clubs.id"), nullable=True,
    )
    book_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("books.id"), nullable=True,
    )
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(),
    )
