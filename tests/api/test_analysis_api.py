"""
Test suite for analysis trigger and report polling endpoints.

System role: Verification of analysis HTTP contracts
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from interview_coach.api.deps import get_analysis_service
from interview_coach.application.services import AnalysisService
from interview_coach.core.exceptions import SessionNotFoundError, StorageError
from interview_coach.main import create_app
from interview_coach.models.report import (
    AnalysisTrigger,
    ReportResponse,
    ReportState,
    ReportStatus,
)


@pytest.fixture
def analysis_service():
    return AsyncMock(spec=AnalysisService)


@pytest.fixture
def client(analysis_service):
    app = create_app()
    app.dependency_overrides[get_analysis_service] = lambda: analysis_service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestStartAnalysis:
    """Test suite for POST /sessions/{id}/analysis."""

    def test_start_should_return_202(self, client, analysis_service) -> None:
        session_id = uuid.uuid4()
        analysis_service.request_analysis.return_value = AnalysisTrigger(
            session_id=session_id, status=ReportState.PENDING, scheduled=True, message="Analysis started."
        )

        response = client.post(f"/api/v1/sessions/{session_id}/analysis")

        assert response.status_code == 202
        assert response.json()["message"] == "Analysis started."

    def test_unknown_session_should_return_404(self, client, analysis_service) -> None:
        analysis_service.request_analysis.side_effect = SessionNotFoundError("abc")

        assert client.post(f"/api/v1/sessions/{uuid.uuid4()}/analysis").status_code == 404

    def test_storage_failure_should_return_500(self, client, analysis_service) -> None:
        analysis_service.request_analysis.side_effect = StorageError("Failed to record analysis job")

        assert client.post(f"/api/v1/sessions/{uuid.uuid4()}/analysis").status_code == 500


class TestGetReport:
    """Test suite for GET /reports/{session_id}."""

    def test_pending_report_should_return_202(self, client, analysis_service) -> None:
        session_id = uuid.uuid4()
        analysis_service.get_report_status.return_value = ReportStatus(
            session_id=session_id, status=ReportState.PENDING, message="Report is being generated."
        )

        response = client.get(f"/api/v1/reports/{session_id}")

        assert response.status_code == 202
        assert response.json()["message"] == "Report is being generated."

    def test_completed_report_should_return_200(self, client, analysis_service) -> None:
        # Arrange
        session_id = uuid.uuid4()
        analysis_service.get_report_status.return_value = ReportStatus(
            session_id=session_id,
            status=ReportState.COMPLETED,
            report=ReportResponse(
                session_id=session_id,
                pace=120,
                clarity_score=85,
                sentiment="Confident",
                qualitative_feedback="Strong answers.",
                created_at=datetime.now(timezone.utc),
            ),
            message="Report is ready.",
        )

        # Act
        response = client.get(f"/api/v1/reports/{session_id}")

        # Assert
        assert response.status_code == 200
        assert response.json()["report"]["pace"] == 120

    def test_failed_report_should_return_200_with_error(self, client, analysis_service) -> None:
        session_id = uuid.uuid4()
        analysis_service.get_report_status.return_value = ReportStatus(
            session_id=session_id,
            status=ReportState.FAILED,
            error={"error_type": "GenerationError"},
            message="Report generation failed.",
        )

        response = client.get(f"/api/v1/reports/{session_id}")

        assert response.status_code == 200
        assert response.json()["status"] == "failed"

    def test_unknown_session_should_return_404(self, client, analysis_service) -> None:
        analysis_service.get_report_status.side_effect = SessionNotFoundError("abc")

        assert client.get(f"/api/v1/reports/{uuid.uuid4()}").status_code == 404
