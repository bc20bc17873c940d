"""
Task modules for the session indexing pipeline.

Exports: ChunkingTask, EmbeddingTask, chunk_text
"""

from .chunking_task import ChunkingTask, chunk_text
from .embedding_task import EmbeddingTask

__all__ = [
    "ChunkingTask",
    "EmbeddingTask",
    "chunk_text",
]
