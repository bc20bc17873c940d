"""
Vector index layer.

Exports: SessionVectorIndex, VectorIndex, VectorRecord, VectorSearchResult, cosine_similarity
"""

from .session_vector_index import SessionVectorIndex, VectorIndex, cosine_similarity
from .vector_schemas import VectorRecord, VectorSearchResult

__all__ = [
    "SessionVectorIndex",
    "VectorIndex",
    "VectorRecord",
    "VectorSearchResult",
    "cosine_similarity",
]
