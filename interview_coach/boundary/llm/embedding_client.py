"""
Embedding provider client.

Wraps a LangChain Embeddings implementation and enforces the provider
contract: one non-empty vector per input, in input order, with a single
dimensionality. Failures propagate as EmbeddingServiceError and are never
retried or replaced by placeholder vectors.

Dependencies: langchain_core, langchain_google_genai, dotenv
System role: Embedding boundary for indexing and retrieval
"""

import logging

from dotenv import load_dotenv
from langchain_core.embeddings import Embeddings
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from interview_coach.configs.llm import LLMSettings
from interview_coach.core.exceptions import EmbeddingServiceError

load_dotenv()

logger = logging.getLogger(__name__)


class EmbeddingClient:
    """Async embedding calls with response validation."""

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Initialize client.

        Args:
            embeddings: Provider implementation (Gemini in production, fakes in tests)
        """
        self._embeddings = embeddings

    async def embed(self, texts: list[str]) -> list[list[float]]:
        """
        Embed a batch of texts.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One vector per text, order preserved

        Raises:
            EmbeddingServiceError: Provider failure or malformed response
        """
        if not texts:
            return []

        try:
            vectors = await self._embeddings.aembed_documents(texts)
        except Exception as e:
            logger.error(f"{__name__}:embed - Provider call failed: {type(e).__name__}: {e}")
            raise EmbeddingServiceError(
                f"Embedding provider failed: {e}",
                details={"batch_size": len(texts)},
            ) from e

        if len(vectors) != len(texts):
            raise EmbeddingServiceError(
                "Embedding provider returned the wrong number of vectors",
                details={"expected": len(texts), "received": len(vectors)},
            )

        dimensions = {len(v) for v in vectors}
        if 0 in dimensions:
            raise EmbeddingServiceError("Embedding provider returned an empty vector")
        if len(dimensions) > 1:
            raise EmbeddingServiceError(
                "Embedding provider returned vectors of mixed dimensionality",
                details={"dimensions": sorted(dimensions)},
            )

        logger.debug(f"{__name__}:embed - Embedded {len(texts)} texts")
        return [list(v) for v in vectors]

    async def embed_query(self, text: str) -> list[float]:
        """
        Embed a single query.

        Raises:
            EmbeddingServiceError: Provider failure or empty vector
        """
        try:
            vector = await self._embeddings.aembed_query(text)
        except Exception as e:
            logger.error(f"{__name__}:embed_query - Provider call failed: {type(e).__name__}: {e}")
            raise EmbeddingServiceError(f"Embedding provider failed: {e}") from e

        if not vector:
            raise EmbeddingServiceError("Embedding provider returned an empty vector")
        return list(vector)


def create_embedding_client(settings: LLMSettings) -> EmbeddingClient:
    """Build the Gemini-backed embedding client."""
    kwargs = {"model": settings.embedding_model}
    if settings.api_key:
        kwargs["google_api_key"] = settings.api_key
    return EmbeddingClient(GoogleGenerativeAIEmbeddings(**kwargs))
