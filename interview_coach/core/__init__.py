"""
Core business logic module.

Contains the exception hierarchy and the domain logic of the interview:
indexing, retrieval, question composition and transcript analysis.
Submodules are imported directly; this package only re-exports exceptions.
"""

from interview_coach.core.exceptions import (
    DocumentAcquisitionError,
    EmbeddingServiceError,
    GenerationError,
    InterviewCoachException,
    InvalidConfigurationError,
    MissingInputError,
    NotFoundError,
    SessionNotFoundError,
    StorageError,
    ValidationError,
    VectorStoreError,
)

__all__ = [
    "DocumentAcquisitionError",
    "EmbeddingServiceError",
    "GenerationError",
    "InterviewCoachException",
    "InvalidConfigurationError",
    "MissingInputError",
    "NotFoundError",
    "SessionNotFoundError",
    "StorageError",
    "ValidationError",
    "VectorStoreError",
]
