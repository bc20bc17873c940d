"""
Dependency injection container.

Factory functions for FastAPI dependencies. Provider clients and the
background runner are process-wide and cached; services are built per
request around the request's database session.

Dependencies: interview_coach.configs, interview_coach.application, interview_coach.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from interview_coach.application.services import (
    AnalysisService,
    InterviewService,
    SessionService,
)
from interview_coach.boundary.db import get_async_db, get_async_session_factory
from interview_coach.boundary.llm import (
    EmbeddingClient,
    GenerationClient,
    create_embedding_client,
    create_generation_client,
)
from interview_coach.configs import Settings, get_settings
from interview_coach.core.analysis import AnalysisPipeline
from interview_coach.core.interview import QuestionGenerator
from interview_coach.core.retriever import ContextRetriever
from interview_coach.workers import AnalysisTaskRunner


class ServiceCache:
    """Container for cached provider clients and the task runner."""

    def __init__(self):
        self._embedding_client = None
        self._generation_client = None
        self._analysis_runner = None

    @property
    def embedding_client(self) -> EmbeddingClient:
        """Get cached embedding client."""
        if self._embedding_client is None:
            self._embedding_client = create_embedding_client(get_settings().llm)
        return self._embedding_client

    @property
    def generation_client(self) -> GenerationClient:
        """Get cached generation client."""
        if self._generation_client is None:
            self._generation_client = create_generation_client(get_settings().llm)
        return self._generation_client

    @property
    def analysis_runner(self) -> AnalysisTaskRunner:
        """Get the process-wide analysis runner."""
        if self._analysis_runner is None:
            self._analysis_runner = AnalysisTaskRunner()
        return self._analysis_runner

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedding_client = None
        self._generation_client = None
        self._analysis_runner = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_embedding_client(
    cache: ServiceCache = Depends(get_service_cache),
) -> EmbeddingClient:
    return cache.embedding_client


def get_generation_client(
    cache: ServiceCache = Depends(get_service_cache),
) -> GenerationClient:
    return cache.generation_client


def get_analysis_runner(
    cache: ServiceCache = Depends(get_service_cache),
) -> AnalysisTaskRunner:
    return cache.analysis_runner


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory used by background runs."""
    return get_async_session_factory()


def get_session_service(
    db: AsyncSession = Depends(get_async_db),
    embedding_client: EmbeddingClient = Depends(get_embedding_client),
    settings: Settings = Depends(get_settings_dependency),
) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)
        embedding_client: Cached embedding client
        settings: Application settings

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db, embedding_client=embedding_client, settings=settings.interview)


def get_interview_service(
    db: AsyncSession = Depends(get_async_db),
    embedding_client: EmbeddingClient = Depends(get_embedding_client),
    generation_client: GenerationClient = Depends(get_generation_client),
    settings: Settings = Depends(get_settings_dependency),
) -> InterviewService:
    """
    Get interview service instance.

    Returns:
        InterviewService: Service wired with retrieval and generation
    """
    question_generator = QuestionGenerator(
        retriever=ContextRetriever(embedding_client),
        generation_client=generation_client,
        top_k=settings.interview.retrieval_top_k,
        history_window=settings.interview.history_window,
    )
    return InterviewService(
        db=db,
        question_generator=question_generator,
        history_window=settings.interview.history_window,
    )


def get_analysis_service(
    db: AsyncSession = Depends(get_async_db),
    generation_client: GenerationClient = Depends(get_generation_client),
    runner: AnalysisTaskRunner = Depends(get_analysis_runner),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AnalysisService:
    """
    Get analysis service instance.

    Returns:
        AnalysisService: Service with the shared runner and background session factory
    """
    return AnalysisService(
        db=db,
        pipeline=AnalysisPipeline(generation_client),
        runner=runner,
        session_factory=session_factory,
    )
