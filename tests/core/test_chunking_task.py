"""
Test suite for fixed-size text chunking.

System role: Verification of the content pipeline's chunking stage
"""

import math

import pytest

from quizgenie.core.content_processing.tasks.chunking_task import ChunkingTask, chunk_text


class TestChunkText:
    """Test suite for chunk_text()."""

    def test_should_split_into_full_chunks_and_shorter_tail(self) -> None:
        # Arrange
        text = "a" * 2000 + "b" * 2000 + "c" * 1000

        # Act
        chunks = chunk_text(text, 2000)

        # Assert
        assert [len(chunk) for chunk in chunks] == [2000, 2000, 1000]
        assert chunks[1] == "b" * 2000

    def test_should_return_empty_list_for_empty_text(self) -> None:
        assert chunk_text("", 2000) == []

    def test_should_return_single_chunk_when_text_fits(self) -> None:
        assert chunk_text("short text", 2000) == ["short text"]

    @pytest.mark.parametrize("length,size", [(1, 1), (7, 3), (4000, 2000), (4001, 2000)])
    def test_should_reassemble_input_with_expected_count(self, length: int, size: int) -> None:
        # Arrange
        text = "".join(chr(ord("a") + i % 26) for i in range(length))

        # Act
        chunks = chunk_text(text, size)

        # Assert
        assert "".join(chunks) == text
        assert len(chunks) == math.ceil(length / size)
        assert all(len(chunk) <= size for chunk in chunks)

    @pytest.mark.parametrize("size", [0, -5])
    def test_should_reject_non_positive_size(self, size: int) -> None:
        with pytest.raises(ValueError):
            chunk_text("text", size)


class TestChunkingTask:
    """Test suite for ChunkingTask."""

    def test_chunk_should_use_configured_size(self) -> None:
        task = ChunkingTask(chunk_size=4)

        assert task.chunk("abcdefghij") == ["abcd", "efgh", "ij"]

    def test_init_should_reject_non_positive_size(self) -> None:
        with pytest.raises(ValueError):
            ChunkingTask(chunk_size=0)
