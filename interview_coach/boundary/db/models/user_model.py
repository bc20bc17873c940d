"""
User ORM model.

Owner of interview sessions. Until authentication exists a single
default user owns every session; the unique email constraint makes
find-or-create race free.

Dependencies: sqlalchemy, interview_coach.boundary.db.base
System role: Session ownership
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from interview_coach.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class UserModel(Base, UUIDMixin, CreatedAtMixin):
    """
    User ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        email: Unique login/contact address
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)

    sessions = relationship("InterviewSessionModel", back_populates="user")
