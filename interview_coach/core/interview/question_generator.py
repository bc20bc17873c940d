"""
Next-question generation.

Retrieves context for the candidate's latest message, composes the
generation request from the interviewer persona, the trimmed history and
the context turn, and returns the model's reply verbatim as the next
question. Persistence is left to the caller.

Dependencies: interview_coach.core.retriever, interview_coach.boundary.llm
System role: Dialogue orchestration
"""

import logging

from pydantic import BaseModel, Field

from interview_coach.boundary.llm.generation_client import GenerationClient
from interview_coach.boundary.llm.llm_schemas import GenerationRequest, Turn
from interview_coach.boundary.vdb import VectorIndex
from interview_coach.core.interview.interviewer_prompt import (
    INTERVIEWER_SYSTEM_PROMPT,
    build_next_question_turn,
)
from interview_coach.core.retriever import DEFAULT_TOP_K, ContextRetriever
from interview_coach.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_WINDOW = 4


class GeneratedQuestion(BaseModel):
    """Question produced for one turn and the context it was grounded on."""

    question: str = Field(description="Next interview question")
    context: list[str] = Field(default_factory=list, description="Retrieved chunk texts, best first")


class QuestionGenerator:
    """Compose and run one question-generation request."""

    def __init__(
        self,
        retriever: ContextRetriever,
        generation_client: GenerationClient,
        top_k: int = DEFAULT_TOP_K,
        history_window: int = DEFAULT_HISTORY_WINDOW,
    ) -> None:
        self._retriever = retriever
        self._generation_client = generation_client
        self._top_k = top_k
        self._history_window = history_window

    def build_request(
        self,
        history: list[Turn],
        query: str,
        context: list[str],
    ) -> GenerationRequest:
        """
        Compose the generation request.

        Only the last `history_window` turns of history are sent, minus any
        leading model turns so the conversation opens with the user.
        """
        trimmed = history[-self._history_window:] if self._history_window > 0 else []
        while trimmed and trimmed[0].role == "model":
            trimmed = trimmed[1:]
        final_turn = Turn(role="user", text=build_next_question_turn(query, context))
        return GenerationRequest(
            system_instruction=INTERVIEWER_SYSTEM_PROMPT,
            turns=[*trimmed, final_turn],
        )

    async def next_question(
        self,
        history: list[Turn],
        query: str,
        index: VectorIndex | None,
    ) -> GeneratedQuestion:
        """
        Generate the next interview question.

        Args:
            history: Prior turns, oldest first
            query: Candidate's latest message, also the retrieval key
            index: Session vector index

        Returns:
            GeneratedQuestion: Question text and retrieved context

        Raises:
            EmbeddingServiceError: Query embedding failed
            GenerationError: Model call failed or returned nothing
        """
        context = await self._retriever.top_k(query, index, self._top_k)
        request = self.build_request(history, query, context)

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:next_question - Requesting question",
            history_turns=len(request.turns) - 1,
            context_chunks=len(context),
        )
        result = await self._generation_client.generate(request)
        return GeneratedQuestion(question=result.text, context=context)
