"""
Test suite for the question endpoint.

System role: Verification of question loop HTTP contracts
"""

import uuid
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from interview_coach.api.deps import get_interview_service
from interview_coach.application.services import InterviewService
from interview_coach.core.exceptions import (
    EmbeddingServiceError,
    GenerationError,
    SessionNotFoundError,
    StorageError,
    ValidationError,
)
from interview_coach.main import create_app
from interview_coach.models.interview import InterviewTurn


@pytest.fixture
def interview_service():
    return AsyncMock(spec=InterviewService)


@pytest.fixture
def client(interview_service):
    app = create_app()
    app.dependency_overrides[get_interview_service] = lambda: interview_service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestAskQuestion:
    """Test suite for POST /sessions/{id}/questions."""

    def test_ask_should_return_question(self, client, interview_service) -> None:
        # Arrange
        session_id = uuid.uuid4()
        interview_service.ask.return_value = InterviewTurn(
            question="Why Python?",
            message_id=uuid.uuid4(),
            user_message_id=uuid.uuid4(),
            context=["Python developer"],
        )

        # Act
        response = client.post(f"/api/v1/sessions/{session_id}/questions", json={"query": "python"})

        # Assert
        assert response.status_code == 200
        assert response.json()["question"] == "Why Python?"
        interview_service.ask.assert_awaited_once_with(session_id, "python")

    def test_empty_query_should_be_rejected_by_schema(self, client, interview_service) -> None:
        response = client.post(f"/api/v1/sessions/{uuid.uuid4()}/questions", json={"query": ""})

        assert response.status_code == 422
        interview_service.ask.assert_not_awaited()

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (ValidationError("Query must not be empty", field="query"), 400),
            (SessionNotFoundError("abc"), 404),
            (EmbeddingServiceError("Embedding provider failed"), 502),
            (GenerationError("Language model returned an empty response"), 502),
            (StorageError("Failed to store interview messages"), 500),
        ],
    )
    def test_domain_errors_should_map_to_status(self, client, interview_service, error, status_code) -> None:
        interview_service.ask.side_effect = error

        response = client.post(f"/api/v1/sessions/{uuid.uuid4()}/questions", json={"query": "  "})

        assert response.status_code == status_code
