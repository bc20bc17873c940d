"""
Interview service for turn-by-turn question generation.

Orchestrates one turn: session validation, history retrieval, question
generation, and atomic persistence of the candidate message and the
question.

Dependencies: interview_coach.core.interview, interview_coach.application.adapters,
interview_coach.boundary.db
System role: Interview service orchestration layer
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from interview_coach.application.adapters.transcript_adapter import TranscriptAdapter
from interview_coach.boundary.db.CRUD.session_crud import session_crud
from interview_coach.boundary.vdb import SessionVectorIndex
from interview_coach.core.exceptions import SessionNotFoundError, StorageError, ValidationError
from interview_coach.core.interview import QuestionGenerator
from interview_coach.models.interview import InterviewTurn

logger = logging.getLogger(__name__)


class InterviewService:
    """
    Interview service for the question loop.

    The generation call happens before anything is written, so a failed
    turn leaves the transcript untouched.
    """

    def __init__(
        self,
        db: AsyncSession,
        question_generator: QuestionGenerator,
        history_window: int = 4,
    ) -> None:
        """
        Initialize interview service.

        Args:
            db: AsyncSession for database operations
            question_generator: Retrieval + generation orchestrator
            history_window: Number of persisted messages sent as history
        """
        self.db = db
        self.question_generator = question_generator
        self.history_window = history_window

    async def ask(self, session_id: UUID, query: str) -> InterviewTurn:
        """
        Generate and persist the next interview question.

        Flow:
        1. Validate session exists
        2. Load recent history (history window)
        3. Retrieve context and generate the question
        4. Store the candidate message and the question together

        Args:
            session_id: Session UUID
            query: Candidate's latest message

        Returns:
            InterviewTurn: Question, message ids and retrieved context

        Raises:
            ValidationError: Empty query
            SessionNotFoundError: Unknown session (before any provider call)
            EmbeddingServiceError: Query embedding failed
            GenerationError: Question generation failed
            StorageError: Messages could not be stored
        """
        if not query or not query.strip():
            raise ValidationError("Query must not be empty", field="query")

        session = await session_crud.get_by_id(self.db, session_id)
        if not session:
            raise SessionNotFoundError(str(session_id))

        index = SessionVectorIndex.from_records(session.vector_store)
        transcript = TranscriptAdapter(session_id=session_id, db=self.db)
        history = await transcript.get_turns(limit=self.history_window)

        generated = await self.question_generator.next_question(history, query, index)

        try:
            user_message, question_message = await transcript.add_exchange(
                query, generated.question
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"{__name__}:ask - Database error: {type(e).__name__}: {e}")
            raise StorageError(
                "Failed to store interview messages",
                operation="append_messages",
                details={"session_id": str(session_id)},
            ) from e

        logger.info(
            f"{__name__}:ask - Stored turn",
            extra={"session_id": str(session_id), "context_chunks": len(generated.context)},
        )
        return InterviewTurn(
            question=generated.question,
            message_id=question_message.id,
            user_message_id=user_message.id,
            context=generated.context,
        )
