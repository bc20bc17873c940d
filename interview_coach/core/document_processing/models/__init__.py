"""
Models for the document indexing pipeline.

Exports: Chunk, EmbeddedChunk
"""

from .chunk import Chunk, EmbeddedChunk

__all__ = ["Chunk", "EmbeddedChunk"]
