"""
Database models package.

Exports:
  - UserModel: Session owner
  - InterviewSessionModel: Source documents and vector index
  - MessageModel: Transcript entries
  - AnalysisReportModel: Post-interview report
  - AnalysisJobModel, JobStatus: Background analysis tracking

Dependencies: sqlalchemy, interview_coach.boundary.db.base
System role: Database model definitions for domain entities
"""

from interview_coach.boundary.db.models.job_model import (
    ACTIVE_JOB_STATUSES,
    AnalysisJobModel,
    JobStatus,
)
from interview_coach.boundary.db.models.message_model import MessageModel
from interview_coach.boundary.db.models.report_model import AnalysisReportModel
from interview_coach.boundary.db.models.session_model import InterviewSessionModel
from interview_coach.boundary.db.models.user_model import UserModel

__all__ = [
    "ACTIVE_JOB_STATUSES",
    "AnalysisJobModel",
    "AnalysisReportModel",
    "InterviewSessionModel",
    "JobStatus",
    "MessageModel",
    "UserModel",
]
