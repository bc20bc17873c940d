"""
Test suite for QuestionGenerator and the interviewer prompt.

System role: Verification of dialogue orchestration
"""

from unittest.mock import AsyncMock

import pytest
from langchain_core.language_models import FakeListChatModel

from interview_coach.boundary.llm import EmbeddingClient, GenerationClient, Turn
from interview_coach.boundary.llm.llm_schemas import GenerationResult
from interview_coach.boundary.vdb import SessionVectorIndex, VectorRecord
from interview_coach.core.exceptions import GenerationError
from interview_coach.core.interview import QuestionGenerator
from interview_coach.core.interview.interviewer_prompt import (
    INTERVIEWER_SYSTEM_PROMPT,
    build_next_question_turn,
    format_context,
)
from interview_coach.core.retriever import ContextRetriever


@pytest.fixture
def history() -> list[Turn]:
    """Six alternating turns, oldest first."""
    return [
        Turn(role="user" if i % 2 == 0 else "model", text=f"turn {i}")
        for i in range(6)
    ]


@pytest.fixture
def small_index() -> SessionVectorIndex:
    return SessionVectorIndex(
        [
            VectorRecord(text="Led kubernetes migration", embedding=[1.0, 0.0, 0.0]),
            VectorRecord(text="Python backend services", embedding=[0.0, 1.0, 0.0]),
        ]
    )


class TestInterviewerPrompt:
    """Test suite for prompt helpers."""

    def test_format_context_should_number_chunks(self) -> None:
        assert format_context(["a", "b"]) == "CONTEXT 1:\na\n\nCONTEXT 2:\nb"

    def test_format_context_should_be_empty_without_chunks(self) -> None:
        assert format_context([]) == ""

    def test_final_turn_should_carry_query_and_context(self) -> None:
        text = build_next_question_turn("I built APIs", ["Python backend services"])

        assert "Candidate's latest message:\nI built APIs" in text
        assert "CONTEXT 1:\nPython backend services" in text
        assert text.endswith("ask the next interview question.")


class TestQuestionGeneratorBuildRequest:
    """Test suite for request composition."""

    def test_request_should_keep_last_four_turns(self, history) -> None:
        # Arrange
        generator = QuestionGenerator(AsyncMock(), AsyncMock(), history_window=4)

        # Act
        request = generator.build_request(history, "latest", ["ctx"])

        # Assert
        assert request.system_instruction == INTERVIEWER_SYSTEM_PROMPT
        assert [t.text for t in request.turns[:4]] == ["turn 2", "turn 3", "turn 4", "turn 5"]
        assert request.turns[-1].role == "user"
        assert "latest" in request.turns[-1].text

    def test_request_with_short_history_should_keep_all(self, history) -> None:
        generator = QuestionGenerator(AsyncMock(), AsyncMock(), history_window=4)

        request = generator.build_request(history[:2], "latest", [])

        assert len(request.turns) == 3

    def test_odd_window_should_not_open_with_model_turn(self, history) -> None:
        generator = QuestionGenerator(AsyncMock(), AsyncMock(), history_window=3)

        request = generator.build_request(history, "latest", [])

        assert [t.text for t in request.turns[:-1]] == ["turn 4", "turn 5"]
        assert request.turns[0].role == "user"

    def test_request_with_zero_window_should_drop_history(self, history) -> None:
        generator = QuestionGenerator(AsyncMock(), AsyncMock(), history_window=0)

        request = generator.build_request(history, "latest", [])

        assert len(request.turns) == 1


class TestQuestionGeneratorNextQuestion:
    """Test suite for next_question()."""

    async def test_next_question_should_return_model_reply_verbatim(
        self, keyword_embeddings, small_index
    ) -> None:
        # Arrange
        generator = QuestionGenerator(
            ContextRetriever(EmbeddingClient(keyword_embeddings)),
            GenerationClient(FakeListChatModel(responses=["  Why Kubernetes?  "])),
            top_k=1,
        )

        # Act
        result = await generator.next_question([], "I like kubernetes", small_index)

        # Assert
        assert result.question == "  Why Kubernetes?  "
        assert result.context == ["Led kubernetes migration"]

    async def test_next_question_should_send_context_in_final_turn(
        self, keyword_embeddings, small_index
    ) -> None:
        # Arrange
        generation_client = AsyncMock(spec=GenerationClient)
        generation_client.generate.return_value = GenerationResult(text="Next?")
        generator = QuestionGenerator(
            ContextRetriever(EmbeddingClient(keyword_embeddings)),
            generation_client,
            top_k=3,
        )

        # Act
        await generator.next_question([], "python please", small_index)

        # Assert
        request = generation_client.generate.await_args.args[0]
        final_text = request.turns[-1].text
        assert final_text.index("Python backend services") < final_text.index("Led kubernetes migration")

    async def test_next_question_without_index_should_still_ask(self, fake_chat_model) -> None:
        generator = QuestionGenerator(
            ContextRetriever(AsyncMock(spec=EmbeddingClient)),
            GenerationClient(fake_chat_model),
        )

        result = await generator.next_question([], "hello", None)

        assert result.context == []
        assert result.question

    async def test_generation_failure_should_propagate(self, small_index) -> None:
        generation_client = AsyncMock(spec=GenerationClient)
        generation_client.generate.side_effect = GenerationError("down")
        retriever = AsyncMock(spec=ContextRetriever)
        retriever.top_k.return_value = []
        generator = QuestionGenerator(retriever, generation_client)

        with pytest.raises(GenerationError):
            await generator.next_question([], "hello", small_index)
