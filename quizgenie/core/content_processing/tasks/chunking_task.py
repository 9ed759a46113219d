"""
Fixed-size text chunking.

Splits extracted text into contiguous slices of at most N characters.
Concatenating the chunks reproduces the input exactly.

Dependencies: None
System role: Second stage of the content pipeline
"""


def chunk_text(text: str, max_size: int) -> list[str]:
    """
    Split text into consecutive chunks of at most max_size characters.

    Args:
        text: Text to split
        max_size: Maximum chunk length in characters

    Returns:
        list[str]: Chunks in order; empty for empty text

    Raises:
        ValueError: When max_size is not positive
    """
    if max_size <= 0:
        raise ValueError(f"max_size must be positive, got {max_size}")
    return [text[start:start + max_size] for start in range(0, len(text), max_size)]


class ChunkingTask:
    """Split document text into fixed-size chunks."""

    def __init__(self, chunk_size: int = 2000) -> None:
        """
        Initialize chunking task.

        Args:
            chunk_size: Maximum chunk size in characters

        Raises:
            ValueError: When chunk_size is not positive
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size

    def chunk(self, text: str) -> list[str]:
        return chunk_text(text, self._chunk_size)
