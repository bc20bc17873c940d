"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, CreatedAtMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - UserModel, InterviewSessionModel, MessageModel, AnalysisReportModel,
    AnalysisJobModel: Domain entities
  - *_crud: CRUD operation singletons

Dependencies: sqlalchemy, interview_coach.configs
System role: Storage collaborator for sessions, transcripts and reports
"""

from interview_coach.boundary.db.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from interview_coach.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from interview_coach.boundary.db.models import (
    AnalysisJobModel,
    AnalysisReportModel,
    InterviewSessionModel,
    JobStatus,
    MessageModel,
    UserModel,
)
from interview_coach.boundary.db.CRUD import (
    job_crud,
    message_crud,
    report_crud,
    session_crud,
    user_crud,
)

__all__ = [
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "AnalysisJobModel",
    "AnalysisReportModel",
    "InterviewSessionModel",
    "JobStatus",
    "MessageModel",
    "UserModel",
    "job_crud",
    "message_crud",
    "report_crud",
    "session_crud",
    "user_crud",
]
