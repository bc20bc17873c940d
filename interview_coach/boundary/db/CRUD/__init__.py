"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from interview_coach.boundary.db.CRUD import session_crud, message_crud

    session = await session_crud.get_by_id(db, session_id)
"""

from interview_coach.boundary.db.CRUD.base_crud import BaseCRUD
from interview_coach.boundary.db.CRUD.job_crud import JobCRUD, job_crud
from interview_coach.boundary.db.CRUD.message_crud import MessageCRUD, message_crud
from interview_coach.boundary.db.CRUD.report_crud import ReportCRUD, report_crud
from interview_coach.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from interview_coach.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "JobCRUD",
    "job_crud",
    "MessageCRUD",
    "message_crud",
    "ReportCRUD",
    "report_crud",
    "SessionCRUD",
    "session_crud",
    "UserCRUD",
    "user_crud",
]
