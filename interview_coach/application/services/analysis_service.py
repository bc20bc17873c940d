"""
Analysis service orchestrator.

Triggers the post-interview analysis without blocking the caller, runs it
in the background with its own database session, and answers report
polls.

A session's analysis job row records pending/running/completed/failed so
that a silently failed run is distinguishable from a slow one. Reports are
created at most once per session.

Dependencies: interview_coach.core.analysis, interview_coach.workers,
interview_coach.boundary.db.CRUD
System role: Analysis use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from interview_coach.application.adapters.transcript_adapter import TranscriptAdapter
from interview_coach.boundary.db.CRUD.job_crud import job_crud
from interview_coach.boundary.db.CRUD.report_crud import report_crud
from interview_coach.boundary.db.CRUD.session_crud import session_crud
from interview_coach.boundary.db.models.job_model import ACTIVE_JOB_STATUSES, JobStatus
from interview_coach.core.analysis import AnalysisPipeline
from interview_coach.core.exceptions import SessionNotFoundError, StorageError
from interview_coach.models.report import (
    AnalysisTrigger,
    ReportResponse,
    ReportState,
    ReportStatus,
)
from interview_coach.observability.log_utils import log_exception_with_context
from interview_coach.workers.analysis_runner import AnalysisTaskRunner

logger = logging.getLogger(__name__)


class AnalysisService:
    """Analysis trigger, background run and polling."""

    def __init__(
        self,
        db: AsyncSession,
        pipeline: AnalysisPipeline,
        runner: AnalysisTaskRunner,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        """
        Initialize analysis service.

        Args:
            db: Request-scoped session used for triggering and polling
            pipeline: Metrics + feedback pipeline
            runner: Background task runner
            session_factory: Factory for the background run's own session
        """
        self.db = db
        self.pipeline = pipeline
        self.runner = runner
        self.session_factory = session_factory

    async def request_analysis(self, session_id: UUID) -> AnalysisTrigger:
        """
        Accept an analysis request and schedule the background run.

        Nothing new is scheduled when a report already exists or this
        process still has a run in flight. A pending or running job with no
        in-flight task was orphaned by a restart or a crash and is
        rescheduled.

        Raises:
            SessionNotFoundError: Unknown session
            StorageError: Job row could not be written
        """
        if not await session_crud.exists(self.db, session_id):
            raise SessionNotFoundError(str(session_id))

        if await report_crud.get_by_session_id(self.db, session_id):
            return AnalysisTrigger(
                session_id=session_id,
                status=ReportState.COMPLETED,
                scheduled=False,
                message="Analysis already completed.",
            )

        job = await job_crud.get_by_session_id(self.db, session_id)
        if job is not None and job.status in ACTIVE_JOB_STATUSES:
            if self.runner.get_task(session_id) is None:
                logger.warning(
                    "Rescheduling orphaned analysis job",
                    extra={"session_id": str(session_id), "job_status": job.status.value},
                )
            else:
                return AnalysisTrigger(
                    session_id=session_id,
                    status=ReportState.PENDING,
                    scheduled=False,
                    message="Analysis already in progress.",
                )

        try:
            await job_crud.ensure_pending(self.db, session_id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageError("Failed to record analysis job", operation="request_analysis") from e

        self.runner.schedule(session_id, lambda: self.run_analysis(session_id))
        return AnalysisTrigger(
            session_id=session_id,
            status=ReportState.PENDING,
            scheduled=True,
            message="Analysis started.",
        )

    async def run_analysis(self, session_id: UUID) -> None:
        """
        Background body: analyze the transcript and write the report.

        Creates its own database session. Every failure is logged and
        recorded on the job row; nothing propagates to a client.
        """
        logger.info("Starting background analysis", extra={"session_id": str(session_id)})

        async with self.session_factory() as db:
            job_id = None
            try:
                job = await job_crud.get_by_session_id(db, session_id)
                if job is None:
                    job = await job_crud.ensure_pending(db, session_id)
                job_id = job.id
                await job_crud.mark_running(db, job_id)
                await db.commit()

                transcript = await TranscriptAdapter(session_id=session_id, db=db).get_transcript()
                if not transcript:
                    logger.warning(
                        "No messages in session to analyze",
                        extra={"session_id": str(session_id)},
                    )
                result = await self.pipeline.analyze(transcript)

                _, created = await report_crud.create_once(
                    db,
                    session_id=session_id,
                    pace=result.pace,
                    clarity_score=result.clarity_score,
                    sentiment=result.sentiment,
                    qualitative_feedback=result.qualitative_feedback,
                )
                await job_crud.mark_completed(db, job_id)
                await db.commit()

                logger.info(
                    "Analysis report stored" if created else "Analysis report already existed",
                    extra={"session_id": str(session_id), "pace": result.pace},
                )

            except Exception as e:
                log_exception_with_context(
                    logger,
                    "Background analysis failed",
                    e,
                    session_id=str(session_id),
                )
                await db.rollback()
                if job_id is None:
                    return
                try:
                    await job_crud.mark_failed(
                        db,
                        job_id,
                        error_details={"error": str(e), "error_type": type(e).__name__},
                    )
                    await db.commit()
                except SQLAlchemyError:
                    logger.exception(
                        "Failed to mark analysis job as failed",
                        extra={"session_id": str(session_id)},
                    )

    async def get_report_status(self, session_id: UUID) -> ReportStatus:
        """
        Side-effect-free poll for a session's report.

        Returns:
            ReportStatus: completed with the report, failed with the error,
            or pending otherwise

        Raises:
            SessionNotFoundError: Unknown session
        """
        report = await report_crud.get_by_session_id(self.db, session_id)
        if report is not None:
            return ReportStatus(
                session_id=session_id,
                status=ReportState.COMPLETED,
                report=ReportResponse.model_validate(report),
                message="Report is ready.",
            )

        if not await session_crud.exists(self.db, session_id):
            raise SessionNotFoundError(str(session_id))

        job = await job_crud.get_by_session_id(self.db, session_id)
        if job is not None and job.status == JobStatus.FAILED:
            return ReportStatus(
                session_id=session_id,
                status=ReportState.FAILED,
                error=job.error or {},
                message="Report generation failed.",
            )

        return ReportStatus(
            session_id=session_id,
            status=ReportState.PENDING,
            message="Report is being generated.",
        )
