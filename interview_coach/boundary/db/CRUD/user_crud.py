"""
User CRUD operations.

Dependencies: sqlalchemy, interview_coach.boundary.db.models.user_model
System role: Session owner persistence
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from interview_coach.boundary.db.CRUD.base_crud import BaseCRUD
from interview_coach.boundary.db.models.user_model import UserModel


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        """
        Retrieve user by email address.

        Args:
            session: Async database session
            email: Unique email

        Returns:
            UserModel if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_or_create(self, session: AsyncSession, email: str) -> UserModel:
        """
        Return the user with this email, creating it if needed.

        Safe under concurrency: the insert is conflict-tolerant and the
        unique email constraint decides which writer wins.

        Args:
            session: Async database session
            email: Unique email

        Returns:
            UserModel: Existing or newly created user
        """
        await self.insert_if_absent(session, ["email"], {"email": email})
        user = await self.get_by_email(session, email)
        if user is None:
            raise RuntimeError(f"User {email} missing after insert")
        return user


user_crud = UserCRUD()
