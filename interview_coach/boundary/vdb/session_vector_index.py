"""
In-memory vector index owned by a single interview session.

Stores embedded chunks in insertion order and answers exact cosine top-K
queries. Ties keep insertion order. Any implementation of the VectorIndex
protocol (an ANN index, for example) can replace it as long as it returns
the same ordering.

Dependencies: numpy, pydantic
System role: Per-session similarity search
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Protocol

import numpy as np

from interview_coach.boundary.vdb.vector_schemas import VectorRecord, VectorSearchResult
from interview_coach.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two equal-length vectors.

    Returns 0.0 when either vector has zero magnitude.

    Raises:
        VectorStoreError: When the vectors differ in length
    """
    if len(a) != len(b):
        raise VectorStoreError(
            f"Vector dimensions differ: {len(a)} != {len(b)}",
            operation="similarity",
        )
    v1 = np.asarray(a, dtype=float)
    v2 = np.asarray(b, dtype=float)
    norm = np.linalg.norm(v1) * np.linalg.norm(v2)
    if norm == 0:
        return 0.0
    return float(np.dot(v1, v2) / norm)


class VectorIndex(Protocol):
    """Interface the retriever needs from a vector index."""

    def __len__(self) -> int: ...

    @property
    def dimension(self) -> int | None: ...

    def search(self, query_embedding: Sequence[float], k: int) -> list[VectorSearchResult]: ...


class SessionVectorIndex:
    """
    Exact cosine index over a session's embedded chunks.

    All records share one dimension, fixed by the first record added.
    """

    def __init__(self, records: Iterable[VectorRecord] | None = None) -> None:
        self._records: list[VectorRecord] = []
        self._dimension: int | None = None
        for record in records or []:
            self.add(record)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def dimension(self) -> int | None:
        return self._dimension

    def add(self, record: VectorRecord) -> None:
        """
        Append one record to the index.

        Raises:
            VectorStoreError: When the embedding dimension differs from the index
        """
        if self._dimension is None:
            self._dimension = len(record.embedding)
        elif len(record.embedding) != self._dimension:
            raise VectorStoreError(
                f"Embedding dimension {len(record.embedding)} does not match index dimension {self._dimension}",
                operation="build",
                details={"position": len(self._records)},
            )
        self._records.append(record)

    def search(self, query_embedding: Sequence[float], k: int) -> list[VectorSearchResult]:
        """
        Return the k records most similar to the query, best first.

        Args:
            query_embedding: Query vector with the index dimension
            k: Maximum number of results

        Returns:
            list[VectorSearchResult]: min(k, len(index)) results ([] when k <= 0)

        Raises:
            VectorStoreError: When the query dimension differs from the index
        """
        if k <= 0 or not self._records:
            return []
        if len(query_embedding) != self._dimension:
            raise VectorStoreError(
                f"Query dimension {len(query_embedding)} does not match index dimension {self._dimension}",
                operation="search",
            )

        matrix = np.asarray([r.embedding for r in self._records], dtype=float)
        query = np.asarray(query_embedding, dtype=float)

        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
        dots = matrix @ query
        scores = np.divide(dots, norms, out=np.zeros_like(dots), where=norms != 0)

        # stable sort on the negated scores keeps insertion order for ties
        order = np.argsort(-scores, kind="stable")[:k]
        results = [
            VectorSearchResult(
                text=self._records[i].text,
                similarity_score=float(scores[i]),
                position=int(i),
            )
            for i in order
        ]
        logger.debug(
            f"{__name__}:search - Returned {len(results)} of {len(self._records)} records"
        )
        return results

    def to_records(self) -> list[dict[str, Any]]:
        """Serialize the index for the session's JSON column."""
        return [record.model_dump() for record in self._records]

    @classmethod
    def from_records(cls, records: list[dict[str, Any]] | None) -> "SessionVectorIndex":
        """
        Rebuild an index from its serialized form.

        Raises:
            VectorStoreError: When a stored record is malformed or dimensions differ
        """
        try:
            parsed = [VectorRecord.model_validate(r) for r in records or []]
        except ValueError as e:
            raise VectorStoreError(
                f"Stored vector record is malformed: {e}",
                operation="load",
            ) from e
        return cls(parsed)
