"""
Test suite for SessionService.

Database collaborators are mocked; indexing runs for real on the keyword
embeddings fake.

System role: Verification of session creation
"""

import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from interview_coach.application.services.session_service import SessionService
from interview_coach.boundary.llm import EmbeddingClient
from interview_coach.core.exceptions import (
    DocumentAcquisitionError,
    EmbeddingServiceError,
    InvalidConfigurationError,
    MissingInputError,
    SessionNotFoundError,
    StorageError,
)

MODULE = "interview_coach.application.services.session_service"


@pytest.fixture
def mock_db():
    """Mock AsyncSession for unit tests."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def service(mock_db, keyword_embeddings, interview_settings) -> SessionService:
    return SessionService(
        db=mock_db,
        embedding_client=EmbeddingClient(keyword_embeddings),
        settings=interview_settings,
    )


class TestCreateSession:
    """Test suite for SessionService.create_session()."""

    async def test_create_should_store_complete_index(
        self, service, mock_db, sample_documents, keyword_embeddings
    ) -> None:
        # Arrange
        session_id = uuid.uuid4()
        user = MagicMock(id=uuid.uuid4())

        # Act
        with patch(f"{MODULE}.user_crud.find_or_create", new_callable=AsyncMock) as find_or_create, \
             patch(f"{MODULE}.session_crud.create", new_callable=AsyncMock) as create:
            find_or_create.return_value = user
            create.return_value = MagicMock(id=session_id)
            result = await service.create_session(
                sample_documents["job_description"], sample_documents["resume"]
            )

        # Assert
        assert result == session_id
        find_or_create.assert_awaited_once_with(mock_db, "testuser@example.com")
        stored = create.await_args.kwargs["vector_store"]
        assert [r["text"] for r in stored] == [
            sample_documents["job_description"],
            sample_documents["resume"][0:50],
            sample_documents["resume"][40:80],
        ]
        assert stored[0]["embedding"] == [1.0, 0.0, 0.0]
        assert create.await_args.kwargs["user_id"] == user.id
        assert len(keyword_embeddings.document_calls) == 1
        mock_db.commit.assert_awaited_once()

    @pytest.mark.parametrize(
        ("jd", "resume", "source"),
        [("", "resume", "job_description"), ("jd", "   ", "resume")],
    )
    async def test_empty_document_should_raise_before_embedding(
        self, service, keyword_embeddings, jd, resume, source
    ) -> None:
        with pytest.raises(MissingInputError) as exc_info:
            await service.create_session(jd, resume)

        assert exc_info.value.details["source"] == source
        assert keyword_embeddings.document_calls == []

    async def test_embedding_failure_should_store_nothing(
        self, mock_db, failing_embeddings, interview_settings, sample_documents
    ) -> None:
        # Arrange
        service = SessionService(mock_db, EmbeddingClient(failing_embeddings), interview_settings)

        # Act
        with patch(f"{MODULE}.session_crud.create", new_callable=AsyncMock) as create:
            with pytest.raises(EmbeddingServiceError):
                await service.create_session(
                    sample_documents["job_description"], sample_documents["resume"]
                )

        # Assert
        create.assert_not_awaited()
        mock_db.commit.assert_not_awaited()

    async def test_invalid_chunk_settings_should_raise(
        self, mock_db, keyword_embeddings, interview_settings
    ) -> None:
        settings = interview_settings.model_copy(update={"chunk_overlap": 50})
        service = SessionService(mock_db, EmbeddingClient(keyword_embeddings), settings)

        with pytest.raises(InvalidConfigurationError):
            await service.create_session("jd text", "resume text")

    async def test_database_error_should_rollback(self, service, mock_db, sample_documents) -> None:
        # Arrange
        error = OperationalError("INSERT", {}, Exception("disk full"))

        # Act
        with patch(f"{MODULE}.user_crud.find_or_create", new_callable=AsyncMock) as find_or_create:
            find_or_create.side_effect = error
            with pytest.raises(StorageError) as exc_info:
                await service.create_session(
                    sample_documents["job_description"], sample_documents["resume"]
                )

        # Assert
        assert exc_info.value.details["operation"] == "create_session"
        mock_db.rollback.assert_awaited_once()


class TestCreateSessionFromSources:
    """Test suite for SessionService.create_session_from_sources()."""

    async def test_sources_should_be_acquired_then_indexed(self, service, tmp_path) -> None:
        # Arrange
        resume_path = tmp_path / "resume.pdf"
        session_id = uuid.uuid4()

        # Act
        with patch(f"{MODULE}.fetch_job_description", new_callable=AsyncMock) as fetch, \
             patch(f"{MODULE}.aparse_resume_pdf", new_callable=AsyncMock) as parse, \
             patch.object(service, "create_session", new_callable=AsyncMock) as create:
            fetch.return_value = "Job text"
            parse.return_value = "Resume text"
            create.return_value = session_id
            result = await service.create_session_from_sources(
                "https://jobs.example.com/1", resume_path
            )

        # Assert
        assert result == session_id
        fetch.assert_awaited_once_with("https://jobs.example.com/1", timeout=15.0)
        parse.assert_awaited_once_with(resume_path)
        create.assert_awaited_once_with(
            "Job text", "Resume text", job_url="https://jobs.example.com/1"
        )

    async def test_fetch_failure_should_propagate(self, service, tmp_path) -> None:
        with patch(f"{MODULE}.fetch_job_description", new_callable=AsyncMock) as fetch, \
             patch(f"{MODULE}.aparse_resume_pdf", new_callable=AsyncMock) as parse:
            fetch.side_effect = DocumentAcquisitionError(
                "Could not retrieve job description from the provided URL.",
                source="job_description",
            )
            parse.return_value = "Resume text"
            with pytest.raises(DocumentAcquisitionError):
                await service.create_session_from_sources("https://x", tmp_path / "r.pdf")


class TestGetSession:
    """Test suite for SessionService.get_session()."""

    async def test_unknown_session_should_raise(self, service) -> None:
        with patch(f"{MODULE}.session_crud.get_by_id", new_callable=AsyncMock) as get_by_id:
            get_by_id.return_value = None
            with pytest.raises(SessionNotFoundError):
                await service.get_session(uuid.uuid4())
