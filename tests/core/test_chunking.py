"""
Test suite for fixed-window chunking.

Covers coverage of the input, exact overlap between neighbours, the short
final chunk and rejection of parameters that cannot advance.

System role: Verification of the first indexing stage
"""

import pytest

from interview_coach.core.document_processing.models import Chunk
from interview_coach.core.document_processing.tasks.chunking_task import (
    ChunkingTask,
    chunk_text,
)
from interview_coach.core.exceptions import InvalidConfigurationError


def _assert_covers(text: str, chunks: list[Chunk]) -> None:
    covered = set()
    for chunk in chunks:
        assert text[chunk.source_offset:chunk.end_offset] == chunk.text
        covered.update(range(chunk.source_offset, chunk.end_offset))
    assert covered == set(range(len(text)))


class TestChunkText:
    """Test suite for chunk_text()."""

    def test_empty_text_should_return_no_chunks(self) -> None:
        assert chunk_text("", 10, 2) == []

    def test_text_shorter_than_window_should_return_single_chunk(self) -> None:
        # Act
        chunks = chunk_text("short", 10, 2)

        # Assert
        assert chunks == [Chunk(text="short", source_offset=0)]

    def test_text_of_exact_window_size_should_return_single_chunk(self) -> None:
        chunks = chunk_text("a" * 10, 10, 2)

        assert len(chunks) == 1

    def test_windows_should_advance_by_size_minus_overlap(self) -> None:
        # Arrange
        text = "abcdefghijklmnopqrstuvwxyz"

        # Act
        chunks = chunk_text(text, 10, 3)

        # Assert
        assert [c.source_offset for c in chunks] == [0, 7, 14, 21]
        assert [c.text for c in chunks] == [
            "abcdefghij",
            "hijklmnopq",
            "opqrstuvwx",
            "vwxyz",
        ]

    @pytest.mark.parametrize(
        ("length", "size", "overlap"),
        [(1, 1, 0), (99, 10, 0), (100, 10, 9), (1000, 1000, 100), (2500, 1000, 100), (37, 7, 3)],
    )
    def test_chunks_should_cover_text_and_overlap_exactly(
        self, length: int, size: int, overlap: int
    ) -> None:
        # Arrange
        text = "".join(chr(ord("a") + i % 26) for i in range(length))

        # Act
        chunks = chunk_text(text, size, overlap)

        # Assert
        _assert_covers(text, chunks)
        for previous, current in zip(chunks, chunks[1:]):
            assert previous.end_offset - current.source_offset == overlap
        assert all(len(c.text) == size for c in chunks[:-1])
        assert 0 < len(chunks[-1].text) <= size

    def test_last_chunk_should_not_be_contained_in_previous(self) -> None:
        chunks = chunk_text("a" * 90, 50, 10)

        assert [c.source_offset for c in chunks] == [0, 40]
        assert chunks[-1].end_offset == 90

    def test_default_parameters_should_use_1000_and_100(self) -> None:
        chunks = chunk_text("x" * 1901)

        assert [c.source_offset for c in chunks] == [0, 900, 1800]

    @pytest.mark.parametrize(("size", "overlap"), [(10, 10), (10, 11), (0, 0), (-1, 0), (10, -1)])
    def test_invalid_configuration_should_raise(self, size: int, overlap: int) -> None:
        with pytest.raises(InvalidConfigurationError):
            chunk_text("some text", size, overlap)

    def test_invalid_configuration_should_raise_even_for_empty_text(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            chunk_text("", 5, 5)


class TestChunkingTask:
    """Test suite for ChunkingTask."""

    def test_init_should_reject_overlap_not_smaller_than_size(self) -> None:
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ChunkingTask(chunk_size=100, chunk_overlap=100)

        assert exc_info.value.details["field"] == "overlap"

    def test_chunk_should_use_configured_window(self) -> None:
        task = ChunkingTask(chunk_size=4, chunk_overlap=1)

        chunks = task.chunk("abcdefg")

        assert [c.text for c in chunks] == ["abcd", "defg"]

    def test_chunks_should_be_immutable(self) -> None:
        chunk = ChunkingTask(chunk_size=4, chunk_overlap=1).chunk("abcdefg")[0]

        with pytest.raises(Exception):
            chunk.text = "changed"
