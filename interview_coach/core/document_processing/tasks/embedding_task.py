"""
Embedding task for chunked documents.

Embeds every chunk in one batched provider call and pairs each chunk with
its vector.

Dependencies: interview_coach.boundary.llm
System role: Second stage of session indexing
"""

from interview_coach.boundary.llm.embedding_client import EmbeddingClient
from interview_coach.core.document_processing.models import Chunk, EmbeddedChunk


class EmbeddingTask:
    """Attach embeddings to chunks."""

    def __init__(self, embedding_client: EmbeddingClient) -> None:
        self._client = embedding_client

    async def embed(self, chunks: list[Chunk]) -> list[EmbeddedChunk]:
        """
        Embed chunks in order.

        Args:
            chunks: Chunks to embed

        Returns:
            list[EmbeddedChunk]: One per chunk, same order

        Raises:
            EmbeddingServiceError: When the provider fails
        """
        if not chunks:
            return []

        vectors = await self._client.embed([chunk.text for chunk in chunks])
        return [
            EmbeddedChunk(text=chunk.text, embedding=vector)
            for chunk, vector in zip(chunks, vectors)
        ]
