"""
Analysis job ORM model.

Tracks the background analysis run of a session so that polling can tell
"still running" apart from "failed silently". One row per session; a
re-trigger after failure resets the same row.

Dependencies: sqlalchemy, interview_coach.boundary.db.base
System role: Async job tracking for the analysis pipeline
"""

import enum
from uuid import UUID

from sqlalchemy import JSON, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from interview_coach.boundary.db.base import Base, TimestampMixin, UUIDMixin


class JobStatus(str, enum.Enum):
    """
    Analysis run states.

    PENDING: Accepted, background task not started yet
    RUNNING: Background task computing metrics / waiting on the model
    COMPLETED: Report written
    FAILED: Run aborted; see error field, no report written
    """

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


ACTIVE_JOB_STATUSES = frozenset({JobStatus.PENDING, JobStatus.RUNNING})


class AnalysisJobModel(Base, UUIDMixin, TimestampMixin):
    """
    Analysis job ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        session_id: Analysed session (unique)
        status: Current execution state
        error: Failure details ({} unless FAILED)
        created_at: First trigger timestamp (UTC)
        updated_at: Last status change timestamp (UTC)

    Workflow:
        1. API accepts the trigger, upserts the row with status=PENDING, commits
        2. Background task marks RUNNING
        3. Task writes the report and marks COMPLETED, or marks FAILED
        4. Clients poll /reports/{session_id}
    """

    __tablename__ = "analysis_jobs"

    session_id: Mapped[UUID] = mapped_column(
        ForeignKey("interview_sessions.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    status: Mapped[JobStatus] = mapped_column(
        Enum(JobStatus, native_enum=False),
        nullable=False,
        default=JobStatus.PENDING,
    )
    error: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        doc="Failure details",
    )
