"""
Domain error to HTTP status mapping.

Dependencies: fastapi, interview_coach.core.exceptions
System role: Error translation for routers
"""

from fastapi import HTTPException

from interview_coach.core.exceptions import (
    DocumentAcquisitionError,
    EmbeddingServiceError,
    GenerationError,
    InterviewCoachException,
    MissingInputError,
    NotFoundError,
    StorageError,
    ValidationError,
    VectorStoreError,
)

# checked in order; subclasses before their parents
STATUS_BY_EXCEPTION: list[tuple[type[InterviewCoachException], int]] = [
    (DocumentAcquisitionError, 422),
    (MissingInputError, 400),
    (ValidationError, 400),
    (NotFoundError, 404),
    (EmbeddingServiceError, 502),
    (GenerationError, 502),
    (StorageError, 500),
    (VectorStoreError, 500),
]


def status_for(error: InterviewCoachException) -> int:
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(error, exc_type):
            return status_code
    return 500


def to_http_exception(error: InterviewCoachException) -> HTTPException:
    """Build the HTTPException a router raises for a domain error."""
    return HTTPException(status_code=status_for(error), detail=error.message)
