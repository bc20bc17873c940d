"""
Session service orchestrator.

Creates interview sessions: acquires or accepts the two source documents,
builds the vector index and persists the session only once the index is
complete.

Dependencies: interview_coach.core.document_processing, interview_coach.boundary.db.CRUD,
interview_coach.boundary.documents
System role: Session use case orchestration
"""

import asyncio
import logging
from pathlib import Path
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from interview_coach.boundary.db.CRUD.message_crud import message_crud
from interview_coach.boundary.db.CRUD.session_crud import session_crud
from interview_coach.boundary.db.CRUD.user_crud import user_crud
from interview_coach.boundary.documents import aparse_resume_pdf, fetch_job_description
from interview_coach.boundary.llm.embedding_client import EmbeddingClient
from interview_coach.configs.interview import InterviewSettings
from interview_coach.core.document_processing import IndexBuildPipeline
from interview_coach.core.exceptions import (
    MissingInputError,
    SessionNotFoundError,
    StorageError,
)
from interview_coach.models.session import MessageResponse, SessionDetailResponse

logger = logging.getLogger(__name__)


class SessionService:
    """Session service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        embedding_client: EmbeddingClient,
        settings: InterviewSettings | None = None,
    ) -> None:
        """
        Initialize session service.

        Args:
            db: Async SQLAlchemy session
            embedding_client: Client used to embed document chunks
            settings: Chunking and default-user configuration
        """
        self.db = db
        self.embedding_client = embedding_client
        self.settings = settings or InterviewSettings()

    async def create_session(
        self,
        job_description_text: str,
        resume_text: str,
        job_url: str | None = None,
    ) -> UUID:
        """
        Index both documents and persist a new session.

        Args:
            job_description_text: Job description plain text
            resume_text: Resume plain text
            job_url: Source of the job description, if fetched

        Returns:
            UUID: Created session ID

        Raises:
            MissingInputError: Either document is empty
            InvalidConfigurationError: Chunk settings cannot advance the window
            EmbeddingServiceError: Provider failure
            StorageError: Database failure (nothing is committed)
        """
        if not job_description_text or not job_description_text.strip():
            raise MissingInputError("Job description text is empty", source="job_description")
        if not resume_text or not resume_text.strip():
            raise MissingInputError("Resume text is empty", source="resume")

        pipeline = IndexBuildPipeline(
            self.embedding_client,
            chunk_size=self.settings.chunk_size,
            chunk_overlap=self.settings.chunk_overlap,
        )
        index = await pipeline.build(job_description_text, resume_text)

        try:
            user = await user_crud.find_or_create(self.db, self.settings.default_user_email)
            session = await session_crud.create(
                self.db,
                user_id=user.id,
                job_url=job_url,
                job_description_text=job_description_text,
                resume_text=resume_text,
                vector_store=index.to_records(),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"{__name__}:create_session - Database error: {type(e).__name__}: {e}")
            raise StorageError("Failed to create interview session", operation="create_session") from e

        logger.info(
            f"{__name__}:create_session - Created session {session.id}",
            extra={"session_id": str(session.id), "chunk_count": len(index)},
        )
        return session.id

    async def create_session_from_sources(
        self,
        job_url: str,
        resume_path: str | Path,
    ) -> UUID:
        """
        Fetch the job page and parse the resume concurrently, then create the session.

        Raises:
            DocumentAcquisitionError: Fetch or parse failed
            MissingInputError: A source yielded no text
        """
        job_description_text, resume_text = await asyncio.gather(
            fetch_job_description(job_url, timeout=self.settings.job_fetch_timeout),
            aparse_resume_pdf(resume_path),
        )
        return await self.create_session(job_description_text, resume_text, job_url=job_url)

    async def get_session(self, session_id: UUID) -> SessionDetailResponse:
        """
        Get session detail with its ordered transcript.

        Raises:
            SessionNotFoundError: Unknown session
        """
        session = await session_crud.get_by_id(self.db, session_id)
        if not session:
            raise SessionNotFoundError(str(session_id))

        messages = await message_crud.list_for_session(self.db, session_id)
        return SessionDetailResponse(
            id=session.id,
            job_url=session.job_url,
            job_description_text=session.job_description_text,
            resume_text=session.resume_text,
            chunk_count=len(session.vector_store or []),
            created_at=session.created_at,
            messages=[MessageResponse.model_validate(m) for m in messages],
        )
