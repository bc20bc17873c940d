"""
Session domain models and schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateSessionFromTextRequest(BaseModel):
    """Request schema for creating a session from already-extracted text."""

    job_description_text: str = Field(description="Job description plain text")
    resume_text: str = Field(description="Resume plain text")
    job_url: str | None = Field(default=None, description="Where the job description came from")


class CreateSessionResponse(BaseModel):
    """Response schema for session creation."""

    session_id: uuid.UUID


class MessageResponse(BaseModel):
    """Single transcript message."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    text: str
    is_user: bool
    created_at: datetime


class SessionDetailResponse(BaseModel):
    """Session with its ordered transcript. Embeddings are not exposed."""

    id: uuid.UUID
    job_url: str | None
    job_description_text: str
    resume_text: str
    chunk_count: int = Field(description="Number of indexed chunks")
    created_at: datetime
    messages: list[MessageResponse]
