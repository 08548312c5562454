"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Only User, Book and UserBook are touched by handlers; the club, discussion
      and voting tables exist in the schema only

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_schema()
      runs and string-based ForeignKey references resolve
"""

from bookclub.models.user import User  # noqa: F401
from bookclub.models.book import Book  # noqa: F401
from bookclub.models.user_book import UserBook  # noqa: F401
from bookclub.models.club import Club  # noqa: F401
from bookclub.models.club_member import ClubMember  # noqa: F401
from bookclub.models.club_book import ClubBook  # noqa: F401
from bookclub.models.discussion import Discussion  # noqa: F401
from bookclub.models.comment import Comment  # noqa: F401
from bookclub.models.vote import Vote  # noqa: F401
from bookclub.models.vote_option import VoteOption  # noqa: F401
from bookclub.models.vote_response import VoteResponse  # noqa: F401
