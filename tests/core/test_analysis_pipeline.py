"""
Test suite for AnalysisPipeline.

System role: Verification of post-interview analysis
"""

import json
from unittest.mock import AsyncMock

import pytest
from langchain_core.language_models import FakeListChatModel

from interview_coach.boundary.llm import GenerationClient
from interview_coach.core.analysis import AnalysisPipeline, TranscriptMessage
from interview_coach.core.analysis.analysis_prompt import serialize_transcript
from interview_coach.core.exceptions import GenerationError, MissingInputError


@pytest.fixture
def transcript() -> list[TranscriptMessage]:
    return [
        TranscriptMessage(text="Tell me about yourself.", is_user=False),
        TranscriptMessage(text="um I think uh it was like okay", is_user=True),
    ]


class TestAnalysisPipeline:
    """Test suite for AnalysisPipeline.analyze()."""

    async def test_analyze_should_combine_metrics_and_feedback(self, transcript) -> None:
        # Arrange
        pipeline = AnalysisPipeline(
            GenerationClient(FakeListChatModel(responses=["Hesitant###Reduce filler words."]))
        )

        # Act
        result = await pipeline.analyze(transcript)

        # Assert
        assert result.pace == 8
        assert result.clarity_score == 0
        assert result.sentiment == "Hesitant"
        assert result.qualitative_feedback == "Reduce filler words."

    async def test_unrecognized_reply_should_keep_metrics(self, transcript) -> None:
        pipeline = AnalysisPipeline(GenerationClient(FakeListChatModel(responses=["no delimiter"])))

        result = await pipeline.analyze(transcript)

        assert result.pace == 8
        assert result.sentiment == "Neutral"
        assert result.qualitative_feedback == "Could not generate feedback."

    async def test_empty_transcript_should_raise(self) -> None:
        pipeline = AnalysisPipeline(AsyncMock(spec=GenerationClient))

        with pytest.raises(MissingInputError):
            await pipeline.analyze([])

    async def test_no_user_messages_should_skip_model(self) -> None:
        # Arrange
        client = AsyncMock(spec=GenerationClient)
        pipeline = AnalysisPipeline(client)

        # Act
        result = await pipeline.analyze([TranscriptMessage(text="Question?", is_user=False)])

        # Assert
        assert (result.pace, result.clarity_score, result.sentiment) == (0, 100, "Neutral")
        client.generate.assert_not_awaited()

    async def test_model_failure_should_propagate(self, transcript) -> None:
        client = AsyncMock(spec=GenerationClient)
        client.generate.side_effect = GenerationError("down")

        with pytest.raises(GenerationError):
            await AnalysisPipeline(client).analyze(transcript)

    def test_transcript_should_serialize_roles_in_order(self, transcript) -> None:
        payload = json.loads(serialize_transcript(transcript))

        assert [m["role"] for m in payload] == ["interviewer", "candidate"]
        assert payload[1]["text"] == "um I think uh it was like okay"
