"""
Transcript analysis pipeline.

Computes speech metrics over the candidate's messages and asks the model
for tone and feedback over the whole transcript. Storage and scheduling
live in the application layer.

Dependencies: interview_coach.boundary.llm
System role: Post-interview analysis
"""

import logging

from interview_coach.boundary.llm.generation_client import GenerationClient
from interview_coach.boundary.llm.llm_schemas import GenerationRequest, Turn
from interview_coach.core.analysis.analysis_prompt import build_analysis_prompt
from interview_coach.core.analysis.analysis_schemas import AnalysisResult, TranscriptMessage
from interview_coach.core.analysis.feedback_parser import (
    DEFAULT_SENTIMENT,
    parse_tone_and_feedback,
)
from interview_coach.core.analysis.speech_metrics import compute_speech_metrics
from interview_coach.core.exceptions import MissingInputError

logger = logging.getLogger(__name__)

NO_RESPONSES_FEEDBACK = "No user responses to analyze."


class AnalysisPipeline:
    """Metrics plus model feedback for one transcript."""

    def __init__(self, generation_client: GenerationClient) -> None:
        self._generation_client = generation_client

    async def analyze(self, messages: list[TranscriptMessage]) -> AnalysisResult:
        """
        Analyze a transcript.

        Args:
            messages: Whole transcript, oldest first

        Returns:
            AnalysisResult: Report fields

        Raises:
            MissingInputError: Transcript is empty
            GenerationError: Feedback call failed
        """
        if not messages:
            raise MissingInputError("No messages in session to analyze.", source="transcript")

        user_texts = [m.text for m in messages if m.is_user]
        if not user_texts:
            # nothing to score or critique
            return AnalysisResult(
                pace=0,
                clarity_score=100,
                sentiment=DEFAULT_SENTIMENT,
                qualitative_feedback=NO_RESPONSES_FEEDBACK,
            )

        metrics = compute_speech_metrics(user_texts)
        logger.info(
            f"{__name__}:analyze - Computed metrics",
            extra={
                "word_count": metrics.word_count,
                "filler_count": metrics.filler_count,
                "pace": metrics.pace,
                "clarity_score": metrics.clarity_score,
            },
        )

        request = GenerationRequest(
            turns=[Turn(role="user", text=build_analysis_prompt(messages))],
        )
        result = await self._generation_client.generate(request)
        sentiment, feedback = parse_tone_and_feedback(result.text)

        return AnalysisResult(
            pace=metrics.pace,
            clarity_score=metrics.clarity_score,
            sentiment=sentiment,
            qualitative_feedback=feedback,
        )
