"""
Interview turn models and schemas.

Dependencies: pydantic
System role: Question generation API contracts
"""

import uuid

from pydantic import BaseModel, Field


class AskQuestionRequest(BaseModel):
    """Request schema for the next interview question."""

    query: str = Field(min_length=1, description="Candidate's latest message")


class InterviewTurn(BaseModel):
    """Result of one turn: the new question and what it was grounded on."""

    question: str
    message_id: uuid.UUID = Field(description="ID of the persisted question message")
    user_message_id: uuid.UUID = Field(description="ID of the persisted candidate message")
    context: list[str] = Field(default_factory=list, description="Retrieved chunk texts, best first")
