"""
Analysis API endpoints.

Routes:
- POST /sessions/{id}/analysis - Start transcript analysis (202, non-blocking)
- GET /reports/{session_id} - Poll for the report

Poll responses use one envelope: 200 when the run has completed or failed,
202 while it is pending. Polling never changes state.

Dependencies: interview_coach.application.services.analysis_service
System role: Analysis HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from interview_coach.api.deps import get_analysis_service
from interview_coach.api.routers.router_utils import to_http_exception
from interview_coach.application.services.analysis_service import AnalysisService
from interview_coach.core.exceptions import InterviewCoachException
from interview_coach.models.common import ErrorResponse
from interview_coach.models.report import AnalysisTrigger, ReportState, ReportStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"], responses={404: {"model": ErrorResponse}})


@router.post(
    "/sessions/{session_id}/analysis",
    response_model=AnalysisTrigger,
    status_code=status.HTTP_202_ACCEPTED,
)
async def start_analysis(
    session_id: UUID,
    analysis_service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisTrigger:
    """
    Accept an analysis request and return immediately.

    Raises:
        HTTPException(404): Session not found
        HTTPException(500): Job could not be recorded
    """
    try:
        trigger = await analysis_service.request_analysis(session_id)
    except InterviewCoachException as e:
        raise to_http_exception(e) from e

    logger.info(
        "Analysis requested",
        extra={"session_id": str(session_id), "scheduled": trigger.scheduled},
    )
    return trigger


@router.get("/reports/{session_id}", response_model=ReportStatus)
async def get_report(
    session_id: UUID,
    response: Response,
    analysis_service: AnalysisService = Depends(get_analysis_service),
) -> ReportStatus:
    """
    Poll the analysis report of a session.

    Clients should poll every few seconds while the status is "pending".

    Raises:
        HTTPException(404): Session not found
    """
    try:
        report_status = await analysis_service.get_report_status(session_id)
    except InterviewCoachException as e:
        raise to_http_exception(e) from e

    if report_status.status == ReportState.PENDING:
        response.status_code = status.HTTP_202_ACCEPTED
    return report_status
