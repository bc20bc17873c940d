"""
Analysis report models and schemas.

Dependencies: pydantic
System role: Analysis trigger and polling API contracts
"""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ReportState(str, Enum):
    """What a poll observes."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class AnalysisTrigger(BaseModel):
    """Acknowledgement returned when analysis is requested."""

    session_id: uuid.UUID
    status: ReportState
    scheduled: bool = Field(description="Whether this request started a new run")
    message: str


class ReportResponse(BaseModel):
    """Completed analysis report."""

    model_config = ConfigDict(from_attributes=True)

    session_id: uuid.UUID
    pace: int
    clarity_score: int
    sentiment: str
    qualitative_feedback: str
    created_at: datetime


class ReportStatus(BaseModel):
    """Poll envelope: a report only when completed, an error only when failed."""

    session_id: uuid.UUID
    status: ReportState
    report: ReportResponse | None = None
    error: dict | None = None
    message: str
