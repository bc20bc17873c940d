"""
Session indexing pipeline.

Chunks source documents, embeds the chunks and builds the session's
vector index.

Dependencies: pydantic, interview_coach.boundary.llm, interview_coach.boundary.vdb
System role: Index construction at session creation
"""

from .entrypoint import IndexBuildPipeline
from .models import Chunk, EmbeddedChunk
from .tasks import ChunkingTask, EmbeddingTask, chunk_text

__all__ = [
    "Chunk",
    "ChunkingTask",
    "EmbeddedChunk",
    "EmbeddingTask",
    "IndexBuildPipeline",
    "chunk_text",
]
