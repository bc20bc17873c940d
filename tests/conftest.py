"""
Shared test fixtures and configuration for entire test suite.

Provides: SQLite async databases, deterministic LangChain fakes for the
embedding and chat providers, sample documents
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core
System role: Test infrastructure and fixture management
"""

import uuid

import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.language_models import FakeListChatModel


class KeywordEmbeddings(Embeddings):
    """
    Deterministic embeddings: one dimension per keyword, valued by its count.

    Texts sharing a keyword point in the same direction, so similarity
    ranking is predictable without a provider.
    """

    def __init__(self, keywords: list[str]) -> None:
        self.keywords = [k.lower() for k in keywords]
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []

    def _vector(self, text: str) -> list[float]:
        lowered = text.lower()
        return [float(lowered.count(k)) for k in self.keywords]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self._vector(t) for t in texts]

    def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self._vector(text)


class FailingEmbeddings(Embeddings):
    """Embeddings provider that always fails."""

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        raise RuntimeError("quota exceeded")

    def embed_query(self, text: str) -> list[float]:
        raise RuntimeError("quota exceeded")


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from interview_coach.boundary.db.base import Base
    import interview_coach.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def file_session_factory(tmp_path):
    """
    File-backed SQLite session factory.

    Request handlers and background runs each open their own session, so
    they need a database that supports independent connections.

    Yields:
        async_sessionmaker: Factory bound to a fresh database
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from interview_coach.boundary.db.create_tables import create_all_tables, drop_all_tables

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'interview.db'}")
    await create_all_tables(engine)

    yield async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def interview_settings():
    """Small chunk windows so short documents produce several chunks."""
    from interview_coach.configs.interview import InterviewSettings

    return InterviewSettings(chunk_size=50, chunk_overlap=10, retrieval_top_k=3, history_window=4)


@pytest.fixture
def sample_documents() -> dict[str, str]:
    """
    Job description of one chunk and resume of two chunks (size 50, overlap 10).

    Keywords: job description -> "kubernetes", first resume chunk -> "python",
    second resume chunk -> "mentoring". No keyword sits in the overlap.
    """
    job_description = "kubernetes platform engineer".ljust(40, ".")
    resume = "python developer".ljust(50, ".") + "mentoring".rjust(30, ".")
    return {"job_description": job_description, "resume": resume}


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    """Embeddings keyed on the sample document keywords."""
    return KeywordEmbeddings(["kubernetes", "python", "mentoring"])


@pytest.fixture
def failing_embeddings() -> FailingEmbeddings:
    return FailingEmbeddings()


@pytest.fixture
def fake_chat_model():
    """Chat model answering with a fixed question."""
    return FakeListChatModel(responses=["How did you scale Python services on Kubernetes?"])


@pytest.fixture
def session_id():
    """Generate a test session ID."""
    return uuid.uuid4()
