"""
Transcript adapter.

High-level access to a session's messages: recent history as generation
turns, the full transcript for analysis, and atomic appends of one
candidate/interviewer exchange.

Dependencies: interview_coach.boundary.db.CRUD.message_crud
System role: Transcript business logic adapter
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from interview_coach.boundary.db.CRUD.message_crud import message_crud
from interview_coach.boundary.db.models.message_model import MessageModel
from interview_coach.boundary.llm.llm_schemas import Turn
from interview_coach.core.analysis.analysis_schemas import TranscriptMessage


class TranscriptAdapter:
    """
    Adapter between stored messages and the domain's transcript types.

    Messages map to turns by author: candidate -> "user", interviewer -> "model".
    """

    def __init__(self, session_id: UUID, db: AsyncSession) -> None:
        """
        Initialize transcript adapter.

        Args:
            session_id: Session UUID for transcript scope
            db: AsyncSession for database operations
        """
        self.session_id = session_id
        self.db = db

    @staticmethod
    def to_turn(message: MessageModel) -> Turn:
        return Turn(role="user" if message.is_user else "model", text=message.text)

    @staticmethod
    def to_transcript_message(message: MessageModel) -> TranscriptMessage:
        return TranscriptMessage(text=message.text, is_user=message.is_user)

    async def get_turns(self, limit: int) -> list[Turn]:
        """
        Most recent messages as generation turns, oldest first.

        Args:
            limit: Maximum number of messages (0 returns none)
        """
        messages = await message_crud.list_recent(self.db, self.session_id, limit)
        return [self.to_turn(m) for m in messages]

    async def get_transcript(self) -> list[TranscriptMessage]:
        """Whole transcript in arrival order."""
        messages = await message_crud.list_for_session(self.db, self.session_id)
        return [self.to_transcript_message(m) for m in messages]

    async def add_exchange(
        self,
        user_text: str,
        assistant_text: str,
    ) -> tuple[MessageModel, MessageModel]:
        """
        Append the candidate message, then the generated question.

        Nothing is committed here; the caller's transaction decides.
        """
        return await message_crud.append_exchange(
            self.db,
            self.session_id,
            user_text,
            assistant_text,
        )
