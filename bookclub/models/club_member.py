"""ClubMember ORM — membership of a user in a club.

Invariants:
    - (club_id, user_id) is the primary key: one membership per user per club
"""

from datetime import datetime

from sqlalchemy import Boolean, Integer, DateTime, ForeignKey, func, text
from sqlalchemy.orm import Mapped, mapped_column

from bookclub.db.base import Base


class ClubMember(Base):
    __tablename__ = "club_members"

    club_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("clubs.id"), primary_key=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), primary_key=True,
    )
    joined_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(),
    )
    is_admin: Mapped[bool | None] = mapped_column(
        Boolean, nullable=True, server_default=text("false"),
    )
