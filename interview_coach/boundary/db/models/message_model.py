"""
Message ORM model.

One transcript entry. Messages are append-only; `sequence` gives the
per-session arrival order and is unique per session, so two writers
racing for the same position fail instead of interleaving.

Dependencies: sqlalchemy, interview_coach.boundary.db.base
System role: Transcript persistence
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from interview_coach.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class MessageModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Message ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        session_id: Owning interview session
        sequence: Zero-based position within the session transcript
        text: Message body
        is_user: True for candidate utterances, False for interviewer questions
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "messages"
    __table_args__ = (
        UniqueConstraint("session_id", "sequence", name="uq_messages_session_sequence"),
    )

    session_id: Mapped[UUID] = mapped_column(
        ForeignKey("interview_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sequence: Mapped[int] = mapped_column(Integer, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    is_user: Mapped[bool] = mapped_column(Boolean, nullable=False)

    session = relationship("InterviewSessionModel", back_populates="messages")
