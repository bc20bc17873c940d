"""
Vector index schemas.

Pydantic models for records stored in a session's vector index and the
scored results returned by a search.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, ConfigDict, Field


class VectorRecord(BaseModel):
    """Chunk text and embedding as persisted with the session."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Chunk text content")
    embedding: list[float] = Field(min_length=1, description="Embedding vector")


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    text: str = Field(description="Chunk text content")
    similarity_score: float = Field(description="Cosine similarity in [-1, 1]")
    position: int = Field(ge=0, description="Insertion position of the chunk in the index")
