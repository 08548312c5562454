"""VoteResponse ORM — a user's ballot for one option.

Invariants:
    - (vote_option_id, user_id) is the primary key: one ballot per user per option
"""

from datetime import datetime

from sqlalchemy import Integer, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column

from bookclub.db.base import Base


class VoteResponse(Base):
    __tablename__ = "vote_responses"

    vote_option_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("vote_options.id"), primary_key=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), primary_key=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(),
    )
