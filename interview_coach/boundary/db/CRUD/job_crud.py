"""
Analysis job CRUD operations.

Provides status tracking for the background analysis run of each session.

Dependencies: sqlalchemy, interview_coach.boundary.db.models.job_model
System role: Job persistence operations for async analysis tracking
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from interview_coach.boundary.db.CRUD.base_crud import BaseCRUD
from interview_coach.boundary.db.models.job_model import AnalysisJobModel, JobStatus


class JobCRUD(BaseCRUD[AnalysisJobModel]):
    """
    CRUD operations for AnalysisJobModel.

    Extends BaseCRUD with session-keyed lookups and status transitions.
    """

    def __init__(self) -> None:
        """Initialize JobCRUD with AnalysisJobModel."""
        super().__init__(AnalysisJobModel)

    async def get_by_session_id(
        self,
        session: AsyncSession,
        session_id: UUID,
    ) -> AnalysisJobModel | None:
        """
        Retrieve the analysis job of a session.

        Args:
            session: Async database session
            session_id: Interview session UUID

        Returns:
            AnalysisJobModel if the session was ever triggered, None otherwise
        """
        # status is written by the background run through another session
        stmt = (
            select(AnalysisJobModel)
            .where(AnalysisJobModel.session_id == session_id)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def ensure_pending(
        self,
        session: AsyncSession,
        session_id: UUID,
    ) -> AnalysisJobModel:
        """
        Create the session's job as PENDING, or reset an existing row to PENDING.

        Args:
            session: Async database session
            session_id: Interview session UUID

        Returns:
            AnalysisJobModel: Job in PENDING state
        """
        inserted = await self.insert_if_absent(
            session,
            ["session_id"],
            {"session_id": session_id, "status": JobStatus.PENDING, "error": {}},
        )
        job = await self.get_by_session_id(session, session_id)
        if job is None:
            raise RuntimeError(f"Analysis job for session {session_id} missing after insert")
        if not inserted:
            job = await self.update_status(session, job.id, JobStatus.PENDING, error={})
        return job

    async def update_status(
        self,
        session: AsyncSession,
        id: UUID,
        status: JobStatus,
        error: dict | None = None,
    ) -> AnalysisJobModel | None:
        """
        Update job execution status with optional error details.

        Args:
            session: Async database session
            id: Job UUID
            status: New execution status
            error: Error details (replaces existing when given)

        Returns:
            Updated AnalysisJobModel if found, None otherwise
        """
        update_fields: dict = {"status": status}
        if error is not None:
            update_fields["error"] = error
        return await self.update_by_id(session, id, **update_fields)

    async def mark_running(self, session: AsyncSession, id: UUID) -> AnalysisJobModel | None:
        """Mark job as running."""
        return await self.update_status(session, id, JobStatus.RUNNING)

    async def mark_completed(self, session: AsyncSession, id: UUID) -> AnalysisJobModel | None:
        """Mark job as completed (report written)."""
        return await self.update_status(session, id, JobStatus.COMPLETED, error={})

    async def mark_failed(
        self,
        session: AsyncSession,
        id: UUID,
        error_details: dict,
    ) -> AnalysisJobModel | None:
        """
        Mark job as failed with error details.

        Args:
            session: Async database session
            id: Job UUID
            error_details: Error information dict

        Returns:
            Updated AnalysisJobModel if found, None otherwise
        """
        return await self.update_status(session, id, JobStatus.FAILED, error=error_details)


job_crud = JobCRUD()
