"""
Analysis report CRUD operations.

Reports are written at most once per session and never updated.

Dependencies: sqlalchemy, interview_coach.boundary.db.models.report_model
System role: Report persistence operations
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from interview_coach.boundary.db.CRUD.base_crud import BaseCRUD
from interview_coach.boundary.db.models.report_model import AnalysisReportModel


class ReportCRUD(BaseCRUD[AnalysisReportModel]):
    """CRUD operations for AnalysisReportModel."""

    def __init__(self) -> None:
        """Initialize ReportCRUD with AnalysisReportModel."""
        super().__init__(AnalysisReportModel)

    async def get_by_session_id(
        self,
        session: AsyncSession,
        session_id: UUID,
    ) -> AnalysisReportModel | None:
        """
        Retrieve the report of a session.

        Args:
            session: Async database session
            session_id: Interview session UUID

        Returns:
            AnalysisReportModel if written, None otherwise
        """
        stmt = select(AnalysisReportModel).where(AnalysisReportModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_once(
        self,
        session: AsyncSession,
        session_id: UUID,
        pace: int,
        clarity_score: int,
        sentiment: str,
        qualitative_feedback: str,
    ) -> tuple[AnalysisReportModel, bool]:
        """
        Create the session's report unless one already exists.

        Args:
            session: Async database session
            session_id: Interview session UUID
            pace: Words per minute
            clarity_score: 0-100 clarity score
            sentiment: Tone label
            qualitative_feedback: Coaching feedback

        Returns:
            tuple[AnalysisReportModel, bool]: Surviving report, and whether
            this call created it
        """
        created = await self.insert_if_absent(
            session,
            ["session_id"],
            {
                "session_id": session_id,
                "pace": pace,
                "clarity_score": clarity_score,
                "sentiment": sentiment,
                "qualitative_feedback": qualitative_feedback,
            },
        )
        report = await self.get_by_session_id(session, session_id)
        if report is None:
            raise RuntimeError(f"Report for session {session_id} missing after insert")
        return report, created


report_crud = ReportCRUD()
