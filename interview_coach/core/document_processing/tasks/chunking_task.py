"""
Fixed-window text chunking.

Splits a document into overlapping windows of `chunk_size` characters that
advance by `chunk_size - overlap`. Every character is covered, consecutive
windows share exactly `overlap` characters and only the last window may be
shorter. Chunking stops at the first window that reaches the end of the
text, so no window is ever contained in its predecessor.

Dependencies: pydantic (Chunk model)
System role: First stage of session indexing
"""

from interview_coach.core.document_processing.models import Chunk
from interview_coach.core.exceptions import InvalidConfigurationError

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 100


def validate_chunking(chunk_size: int, overlap: int) -> None:
    """
    Reject parameters that would never advance the window.

    Raises:
        InvalidConfigurationError: chunk_size < 1, overlap < 0 or overlap >= chunk_size
    """
    if chunk_size < 1:
        raise InvalidConfigurationError(
            f"chunk_size must be positive, got {chunk_size}",
            field="chunk_size",
        )
    if overlap < 0:
        raise InvalidConfigurationError(
            f"overlap must not be negative, got {overlap}",
            field="overlap",
        )
    if overlap >= chunk_size:
        raise InvalidConfigurationError(
            f"overlap ({overlap}) must be smaller than chunk_size ({chunk_size})",
            field="overlap",
            details={"chunk_size": chunk_size, "overlap": overlap},
        )


def chunk_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
) -> list[Chunk]:
    """
    Split text into overlapping fixed-size chunks.

    Args:
        text: Document text of any length
        chunk_size: Window size in characters
        overlap: Characters shared by consecutive windows

    Returns:
        list[Chunk]: Windows in document order ([] for empty text)

    Raises:
        InvalidConfigurationError: When the parameters cannot advance the window
    """
    validate_chunking(chunk_size, overlap)

    step = chunk_size - overlap
    chunks: list[Chunk] = []
    start = 0
    while start < len(text):
        end = min(start + chunk_size, len(text))
        chunks.append(Chunk(text=text[start:end], source_offset=start))
        if end == len(text):
            break
        start += step
    return chunks


class ChunkingTask:
    """Split documents into chunks with a validated window configuration."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    ) -> None:
        """
        Initialize chunking task with window configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            InvalidConfigurationError: When overlap >= chunk_size
        """
        validate_chunking(chunk_size, chunk_overlap)
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap

    def chunk(self, text: str) -> list[Chunk]:
        """
        Split one document into chunks.

        Args:
            text: Document text

        Returns:
            list[Chunk]: Chunks in document order
        """
        return chunk_text(text, self._chunk_size, self._chunk_overlap)
