"""
Chunk domain models for the document indexing pipeline.

Chunk is a window of a source document; EmbeddedChunk is what the
session's vector index stores.

Dependencies: pydantic
System role: Data structures for document chunks in the indexing pipeline
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Immutable text window of a source document."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Chunk text content")
    source_offset: int = Field(ge=0, description="Start position of the window in its document")

    @property
    def end_offset(self) -> int:
        """Exclusive end position of the window."""
        return self.source_offset + len(self.text)


class EmbeddedChunk(BaseModel):
    """Chunk text paired with its embedding vector."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Chunk text content")
    embedding: list[float] = Field(description="Embedding vector")
