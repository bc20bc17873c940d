"""
Interview API endpoints.

Routes: POST /sessions/{id}/questions

Dependencies: interview_coach.application.services.interview_service
System role: Question loop HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from interview_coach.api.deps import get_interview_service
from interview_coach.api.routers.router_utils import to_http_exception
from interview_coach.application.services.interview_service import InterviewService
from interview_coach.core.exceptions import InterviewCoachException
from interview_coach.models.common import ErrorResponse
from interview_coach.models.interview import AskQuestionRequest, InterviewTurn

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sessions",
    tags=["interview"],
    responses={404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)


@router.post("/{session_id}/questions", response_model=InterviewTurn)
async def ask_question(
    session_id: UUID,
    request: AskQuestionRequest,
    interview_service: InterviewService = Depends(get_interview_service),
) -> InterviewTurn:
    """
    Generate the next interview question for the candidate's message.

    A failed turn stores nothing; the client may resend.

    Raises:
        HTTPException(400): Empty query
        HTTPException(404): Session not found
        HTTPException(502): Embedding or generation provider failed
        HTTPException(500): Storage failed
    """
    try:
        return await interview_service.ask(session_id, request.query)
    except InterviewCoachException as e:
        logger.warning(
            "Question generation failed",
            extra={
                "session_id": str(session_id),
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
        raise to_http_exception(e) from e
