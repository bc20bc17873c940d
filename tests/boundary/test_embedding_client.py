"""
Test suite for EmbeddingClient.

System role: Verification of the embedding provider boundary
"""

from unittest.mock import patch

import pytest
from langchain_core.embeddings import Embeddings

from interview_coach.boundary.llm import EmbeddingClient, create_embedding_client
from interview_coach.configs.llm import LLMSettings
from interview_coach.core.exceptions import EmbeddingServiceError


class CannedEmbeddings(Embeddings):
    """Embeddings returning fixed vectors regardless of input."""

    def __init__(self, vectors: list[list[float]], query_vector: list[float] | None = None) -> None:
        self.vectors = vectors
        self.query_vector = query_vector or []

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return self.vectors

    def embed_query(self, text: str) -> list[float]:
        return self.query_vector


class TestEmbeddingClientEmbed:
    """Test suite for EmbeddingClient.embed()."""

    async def test_embed_should_return_one_vector_per_text_in_order(self, keyword_embeddings) -> None:
        # Arrange
        client = EmbeddingClient(keyword_embeddings)

        # Act
        vectors = await client.embed(["python python", "kubernetes", "mentoring"])

        # Assert
        assert vectors == [[0.0, 2.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]]
        assert keyword_embeddings.document_calls == [["python python", "kubernetes", "mentoring"]]

    async def test_empty_batch_should_not_call_provider(self, keyword_embeddings) -> None:
        assert await EmbeddingClient(keyword_embeddings).embed([]) == []
        assert keyword_embeddings.document_calls == []

    async def test_provider_failure_should_raise_embedding_error(self, failing_embeddings) -> None:
        with pytest.raises(EmbeddingServiceError) as exc_info:
            await EmbeddingClient(failing_embeddings).embed(["text"])

        assert "quota exceeded" in exc_info.value.message

    @pytest.mark.parametrize(
        "vectors",
        [
            [[1.0]],
            [[1.0, 0.0], []],
            [[1.0, 0.0], [1.0, 0.0, 0.0]],
        ],
        ids=["wrong_count", "empty_vector", "mixed_dimensions"],
    )
    async def test_malformed_response_should_raise(self, vectors) -> None:
        client = EmbeddingClient(CannedEmbeddings(vectors))

        with pytest.raises(EmbeddingServiceError):
            await client.embed(["a", "b"])


class TestEmbeddingClientEmbedQuery:
    """Test suite for EmbeddingClient.embed_query()."""

    async def test_embed_query_should_return_vector(self, keyword_embeddings) -> None:
        vector = await EmbeddingClient(keyword_embeddings).embed_query("mentoring")

        assert vector == [0.0, 0.0, 1.0]

    async def test_empty_query_vector_should_raise(self) -> None:
        with pytest.raises(EmbeddingServiceError):
            await EmbeddingClient(CannedEmbeddings([], query_vector=[])).embed_query("x")

    async def test_provider_failure_should_raise(self, failing_embeddings) -> None:
        with pytest.raises(EmbeddingServiceError):
            await EmbeddingClient(failing_embeddings).embed_query("x")


class TestCreateEmbeddingClient:
    """Test suite for create_embedding_client()."""

    def test_factory_should_pass_model_and_key(self) -> None:
        settings = LLMSettings(api_key="secret", embedding_model="models/test-embedding")

        with patch(
            "interview_coach.boundary.llm.embedding_client.GoogleGenerativeAIEmbeddings"
        ) as provider:
            client = create_embedding_client(settings)

        provider.assert_called_once_with(model="models/test-embedding", google_api_key="secret")
        assert isinstance(client, EmbeddingClient)
