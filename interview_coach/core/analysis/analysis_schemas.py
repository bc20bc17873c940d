"""
Transcript analysis schemas.

Dependencies: pydantic
System role: Input and output types of the analysis pipeline
"""

from pydantic import BaseModel, ConfigDict, Field


class TranscriptMessage(BaseModel):
    """One transcript entry as the analysis sees it."""

    model_config = ConfigDict(frozen=True)

    text: str
    is_user: bool


class SpeechMetrics(BaseModel):
    """Quantitative metrics over the candidate's messages."""

    pace: int = Field(description="Words per estimated minute, rounded")
    clarity_score: int = Field(ge=0, le=100, description="100 minus filler penalty, rounded")
    word_count: int = Field(ge=0)
    filler_count: int = Field(ge=0)


class AnalysisResult(BaseModel):
    """Everything persisted in an analysis report."""

    pace: int
    clarity_score: int
    sentiment: str
    qualitative_feedback: str
