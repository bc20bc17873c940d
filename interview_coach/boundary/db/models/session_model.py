"""
Interview session ORM model.

Holds the two source documents and the session's vector index, which is
written once at creation time and never modified afterwards.

Dependencies: sqlalchemy, interview_coach.boundary.db.base
System role: Session persistence for the interview loop
"""

from uuid import UUID

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from interview_coach.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class InterviewSessionModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Interview session ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user
        job_url: Job posting the description was fetched from (optional)
        job_description_text: Normalized job description text
        resume_text: Normalized resume text
        vector_store: JSON list of {"text": str, "embedding": list[float]}
        created_at: Session creation timestamp (UTC)

    Relationships:
        messages: Transcript, ordered by sequence
        analysis_report: At most one report
    """

    __tablename__ = "interview_sessions"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    job_url: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
    job_description_text: Mapped[str] = mapped_column(Text, nullable=False)
    resume_text: Mapped[str] = mapped_column(Text, nullable=False)
    vector_store: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Embedded chunks of both documents",
    )

    user = relationship("UserModel", back_populates="sessions")
    messages = relationship(
        "MessageModel",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="MessageModel.sequence",
    )
    analysis_report = relationship(
        "AnalysisReportModel",
        back_populates="session",
        cascade="all, delete-orphan",
        uselist=False,
    )
