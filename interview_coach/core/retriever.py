"""
Context retrieval for question generation.

Embeds the live query and returns the most similar chunks from the
session's vector index. An empty or absent index yields no context and
does not contact the embedding provider.

Dependencies: interview_coach.boundary.vdb, interview_coach.boundary.llm
System role: RAG retrieval business logic
"""

import logging

from interview_coach.boundary.llm.embedding_client import EmbeddingClient
from interview_coach.boundary.vdb import VectorIndex, VectorSearchResult

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3


class ContextRetriever:
    """Top-K cosine retrieval over a session index."""

    def __init__(self, embedding_client: EmbeddingClient) -> None:
        """Initialize retriever with the embedding client used for queries."""
        self._embedding_client = embedding_client

    async def retrieve(
        self,
        query: str,
        index: VectorIndex | None,
        k: int = DEFAULT_TOP_K,
    ) -> list[VectorSearchResult]:
        """
        Retrieve scored chunks for a query.

        Args:
            query: Retrieval key (the candidate's latest utterance)
            index: Session index, may be None or empty
            k: Maximum number of results

        Returns:
            list[VectorSearchResult]: Best first, ties in insertion order

        Raises:
            EmbeddingServiceError: Query embedding failed
            VectorStoreError: Query dimension differs from the index
        """
        if index is None or len(index) == 0 or k <= 0:
            return []

        query_embedding = await self._embedding_client.embed_query(query)
        results = index.search(query_embedding, k)
        logger.info(
            f"{__name__}:retrieve - Retrieved {len(results)} chunks (k={k}, index_size={len(index)})"
        )
        return results

    async def top_k(
        self,
        query: str,
        index: VectorIndex | None,
        k: int = DEFAULT_TOP_K,
    ) -> list[str]:
        """Return only the texts of the top-k chunks."""
        return [result.text for result in await self.retrieve(query, index, k)]
