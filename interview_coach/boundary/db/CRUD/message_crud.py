"""
Message CRUD operations.

Append-only transcript storage. Messages are listed in arrival order and
never updated or deleted individually.

Dependencies: sqlalchemy, interview_coach.boundary.db.models.message_model
System role: Transcript persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from interview_coach.boundary.db.CRUD.base_crud import BaseCRUD
from interview_coach.boundary.db.models.message_model import MessageModel


class MessageCRUD(BaseCRUD[MessageModel]):
    """CRUD operations for MessageModel."""

    def __init__(self) -> None:
        """Initialize MessageCRUD with MessageModel."""
        super().__init__(MessageModel)

    async def list_for_session(
        self,
        session: AsyncSession,
        session_id: UUID,
    ) -> Sequence[MessageModel]:
        """
        Retrieve the full transcript of a session in arrival order.

        Args:
            session: Async database session
            session_id: Interview session UUID

        Returns:
            Sequence of MessageModels ordered by sequence
        """
        stmt = (
            select(MessageModel)
            .where(MessageModel.session_id == session_id)
            .order_by(MessageModel.sequence)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_recent(
        self,
        session: AsyncSession,
        session_id: UUID,
        limit: int,
    ) -> list[MessageModel]:
        """
        Retrieve the most recent messages, oldest first.

        Args:
            session: Async database session
            session_id: Interview session UUID
            limit: Maximum number of messages (0 returns nothing)

        Returns:
            list[MessageModel]: Up to `limit` latest messages in arrival order
        """
        if limit <= 0:
            return []
        stmt = (
            select(MessageModel)
            .where(MessageModel.session_id == session_id)
            .order_by(MessageModel.sequence.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return list(reversed(result.scalars().all()))

    async def next_sequence(self, session: AsyncSession, session_id: UUID) -> int:
        """
        Position the next appended message will take.

        Args:
            session: Async database session
            session_id: Interview session UUID

        Returns:
            int: max(sequence) + 1, or 0 for an empty transcript
        """
        stmt = select(func.max(MessageModel.sequence)).where(
            MessageModel.session_id == session_id
        )
        result = await session.execute(stmt)
        current = result.scalar_one_or_none()
        return 0 if current is None else current + 1

    async def append_exchange(
        self,
        session: AsyncSession,
        session_id: UUID,
        user_text: str,
        assistant_text: str,
    ) -> tuple[MessageModel, MessageModel]:
        """
        Append a candidate utterance followed by the interviewer's question.

        Both rows are flushed in the caller's transaction, so they are
        committed or rolled back together.

        Args:
            session: Async database session
            session_id: Interview session UUID
            user_text: Candidate message
            assistant_text: Generated question

        Returns:
            tuple[MessageModel, MessageModel]: (user message, assistant message)
        """
        start = await self.next_sequence(session, session_id)
        user_message = MessageModel(
            session_id=session_id, sequence=start, text=user_text, is_user=True
        )
        assistant_message = MessageModel(
            session_id=session_id, sequence=start + 1, text=assistant_text, is_user=False
        )
        session.add_all([user_message, assistant_message])
        await session.flush()
        return user_message, assistant_message

    async def count_for_session(self, session: AsyncSession, session_id: UUID) -> int:
        """
        Count transcript messages of a session.

        Args:
            session: Async database session
            session_id: Interview session UUID

        Returns:
            int: Number of messages
        """
        stmt = select(func.count(MessageModel.id)).where(MessageModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.scalar_one()


message_crud = MessageCRUD()
