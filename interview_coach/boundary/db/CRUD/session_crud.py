"""
Interview session CRUD operations.

Provides Create and Read operations for InterviewSessionModel with
eager loading of the transcript.

Dependencies: sqlalchemy, interview_coach.boundary.db.models.session_model
System role: Session persistence operations
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from interview_coach.boundary.db.CRUD.base_crud import BaseCRUD
from interview_coach.boundary.db.models.session_model import InterviewSessionModel


class SessionCRUD(BaseCRUD[InterviewSessionModel]):
    """
    CRUD operations for InterviewSessionModel.

    Sessions are never updated after creation, so no update helpers
    are exposed here.
    """

    def __init__(self) -> None:
        """Initialize SessionCRUD with InterviewSessionModel."""
        super().__init__(InterviewSessionModel)

    async def get_with_messages(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> InterviewSessionModel | None:
        """
        Retrieve session with eagerly loaded, ordered transcript.

        Args:
            session: Async database session
            id: Session UUID

        Returns:
            InterviewSessionModel with messages loaded, None if not found
        """
        stmt = (
            select(InterviewSessionModel)
            .where(InterviewSessionModel.id == id)
            .options(selectinload(InterviewSessionModel.messages))
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


session_crud = SessionCRUD()
