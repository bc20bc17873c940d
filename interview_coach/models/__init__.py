"""
API request/response schemas.
"""

from interview_coach.models.common import ErrorResponse
from interview_coach.models.interview import AskQuestionRequest, InterviewTurn
from interview_coach.models.report import (
    AnalysisTrigger,
    ReportResponse,
    ReportState,
    ReportStatus,
)
from interview_coach.models.session import (
    CreateSessionFromTextRequest,
    CreateSessionResponse,
    MessageResponse,
    SessionDetailResponse,
)

__all__ = [
    "AnalysisTrigger",
    "AskQuestionRequest",
    "CreateSessionFromTextRequest",
    "CreateSessionResponse",
    "ErrorResponse",
    "InterviewTurn",
    "MessageResponse",
    "ReportResponse",
    "ReportState",
    "ReportStatus",
    "SessionDetailResponse",
]
