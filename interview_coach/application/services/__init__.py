"""Service orchestrators."""

from .analysis_service import AnalysisService
from .interview_service import InterviewService
from .session_service import SessionService

__all__ = [
    "AnalysisService",
    "InterviewService",
    "SessionService",
]
