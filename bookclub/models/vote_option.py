"""VoteOption ORM — a candidate book in a vote."""

from datetime import datetime

from sqlalchemy import Integer, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column

from bookclub.db.base import Base


class VoteOption(Base):
    __tablename__ = "vote_options"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    vote_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("votes.id"), nullable=True,
    )
    book_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("books.id"), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(),
    )
