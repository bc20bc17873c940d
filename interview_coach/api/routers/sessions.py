"""
Session API endpoints.

Routes:
- POST /sessions - Create session from a job URL and a resume PDF (multipart)
- POST /sessions/text - Create session from already-extracted text
- GET /sessions/{id} - Session detail with transcript

Dependencies: interview_coach.application.services.session_service, interview_coach.models
System role: Session management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from interview_coach.api.deps import get_session_service, get_settings_dependency
from interview_coach.api.routers.router_utils import (
    cleanup_temp_file,
    save_upload_to_temp,
    to_http_exception,
)
from interview_coach.application.services.session_service import SessionService
from interview_coach.configs import Settings
from interview_coach.core.exceptions import InterviewCoachException
from interview_coach.models.common import ErrorResponse
from interview_coach.models.session import (
    CreateSessionFromTextRequest,
    CreateSessionResponse,
    SessionDetailResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    responses={422: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)


@router.post("", response_model=CreateSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    job_url: str = Form(...),
    resume: UploadFile = File(...),
    session_service: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_settings_dependency),
) -> CreateSessionResponse:
    """
    Create session from a job posting URL and a resume PDF.

    Returns only after both documents are indexed.

    Raises:
        HTTPException(400): Invalid upload, empty document or bad chunk settings
        HTTPException(422): Job page or resume could not be acquired
        HTTPException(502): Embedding provider failed
        HTTPException(500): Storage failed
    """
    if not job_url.strip():
        raise HTTPException(status_code=400, detail="Missing job URL")

    resume_path = await save_upload_to_temp(resume, settings.interview.max_resume_bytes)
    try:
        session_id = await session_service.create_session_from_sources(
            job_url=job_url.strip(),
            resume_path=resume_path,
        )
        return CreateSessionResponse(session_id=session_id)
    except InterviewCoachException as e:
        logger.warning(
            "Session creation failed",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        raise to_http_exception(e) from e
    finally:
        cleanup_temp_file(resume_path)


@router.post("/text", response_model=CreateSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session_from_text(
    request: CreateSessionFromTextRequest,
    session_service: SessionService = Depends(get_session_service),
) -> CreateSessionResponse:
    """
    Create session from job description and resume text.

    Raises:
        HTTPException(400): Empty document or bad chunk settings
        HTTPException(502): Embedding provider failed
        HTTPException(500): Storage failed
    """
    try:
        session_id = await session_service.create_session(
            job_description_text=request.job_description_text,
            resume_text=request.resume_text,
            job_url=request.job_url,
        )
        return CreateSessionResponse(session_id=session_id)
    except InterviewCoachException as e:
        logger.warning(
            "Session creation failed",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        raise to_http_exception(e) from e


@router.get("/{session_id}", response_model=SessionDetailResponse)
async def get_session(
    session_id: UUID,
    session_service: SessionService = Depends(get_session_service),
) -> SessionDetailResponse:
    """
    Get session detail with its ordered transcript.

    Raises:
        HTTPException(404): Session not found
    """
    try:
        return await session_service.get_session(session_id)
    except InterviewCoachException as e:
        raise to_http_exception(e) from e
