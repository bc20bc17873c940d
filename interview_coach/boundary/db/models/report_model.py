"""
Analysis report ORM model.

Post-interview performance report. The unique session_id constraint
guarantees at most one report per session even when two analysis runs
finish concurrently.

Dependencies: sqlalchemy, interview_coach.boundary.db.base
System role: Report persistence for polling
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from interview_coach.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class AnalysisReportModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Analysis report ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        session_id: Analysed session (unique)
        pace: Estimated words per minute
        clarity_score: 0-100, penalized by filler words
        sentiment: Inferred tone label
        qualitative_feedback: Free-text coaching feedback
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "analysis_reports"

    session_id: Mapped[UUID] = mapped_column(
        ForeignKey("interview_sessions.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    pace: Mapped[int] = mapped_column(Integer, nullable=False)
    clarity_score: Mapped[int] = mapped_column(Integer, nullable=False)
    sentiment: Mapped[str] = mapped_column(String(100), nullable=False)
    qualitative_feedback: Mapped[str] = mapped_column(Text, nullable=False)

    session = relationship("InterviewSessionModel", back_populates="analysis_report")
