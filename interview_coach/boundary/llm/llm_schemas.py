"""
Language model request/response schemas.

Explicit, validated shapes for what the generation provider receives and
returns, replacing untyped JSON payloads at the provider boundary.

Dependencies: pydantic
System role: Type definitions for generation calls
"""

from typing import Literal

from pydantic import BaseModel, Field


class Turn(BaseModel):
    """One role-tagged conversational turn."""

    role: Literal["user", "model"] = Field(description="Author of the turn")
    text: str = Field(min_length=1, description="Turn text")


class GenerationRequest(BaseModel):
    """Ordered turns plus an optional system instruction."""

    system_instruction: str | None = Field(default=None, description="Persona and rules")
    turns: list[Turn] = Field(min_length=1, description="Conversation turns, oldest first")


class GenerationResult(BaseModel):
    """Single generated text continuation."""

    text: str = Field(min_length=1, description="Generated text")
