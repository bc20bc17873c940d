"""
Session index builder.

Coordinates chunking and embedding of the job description and the resume
into one vector index. The index is returned only once every chunk has an
embedding, so callers never see a partial index.

Dependencies: All task modules, interview_coach.boundary.vdb
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from interview_coach.boundary.llm.embedding_client import EmbeddingClient
from interview_coach.boundary.vdb import SessionVectorIndex, VectorRecord

from .tasks import ChunkingTask, EmbeddingTask

logger = logging.getLogger(__name__)


class IndexBuildPipeline:
    """Orchestrate indexing: chunk -> embed -> index."""

    def __init__(
        self,
        embedding_client: EmbeddingClient,
        chunk_size: int = 1000,
        chunk_overlap: int = 100,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            embedding_client: Provider client used for the batch embedding call
            chunk_size: Chunk window size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            InvalidConfigurationError: When chunk_overlap >= chunk_size
        """
        self._chunking_task = ChunkingTask(chunk_size=chunk_size, chunk_overlap=chunk_overlap)
        self._embedding_task = EmbeddingTask(embedding_client)

    async def build(self, *documents: str) -> SessionVectorIndex:
        """
        Build a vector index over the documents, in argument order.

        Args:
            documents: Document texts (job description first, then resume)

        Returns:
            SessionVectorIndex: Complete index

        Raises:
            EmbeddingServiceError: Provider failure
            VectorStoreError: Mixed embedding dimensionality
        """
        start_time = time.perf_counter()

        chunks = [chunk for text in documents for chunk in self._chunking_task.chunk(text)]
        embedded = await self._embedding_task.embed(chunks)
        index = SessionVectorIndex(
            VectorRecord(text=item.text, embedding=item.embedding) for item in embedded
        )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:build - Indexed {len(index)} chunks from {len(documents)} documents",
            extra={"chunk_count": len(index), "elapsed_ms": round(elapsed_ms, 2)},
        )
        return index
