"""
Quiz context builder.

Assembles the study material sent to the generation client from a bucket's
chunks, keeping within a character budget. When everything does not fit,
chunks are sampled at evenly spaced positions so the context covers the
whole bucket rather than just its first pages.

Dependencies: None
System role: Context assembly for quiz generation
"""

import math

CHUNK_SEPARATOR = "\n\n"


def build_context(chunks: list[str], max_chars: int, separator: str = CHUNK_SEPARATOR) -> str:
    """
    Join chunks into a context string of at most max_chars characters.

    Args:
        chunks: Chunk texts ordered by document, then sequence index
        max_chars: Character budget
        separator: Text placed between chunks

    Returns:
        str: Context string; empty when there are no chunks
    """
    if not chunks or max_chars <= 0:
        return ""

    full = separator.join(chunks)
    if len(full) <= max_chars:
        return full

    average = len(full) / len(chunks)
    sample_size = min(len(chunks), max(1, math.ceil(max_chars / average)))
    step = len(chunks) / sample_size
    indices = sorted({int(i * step) for i in range(sample_size)})

    parts: list[str] = []
    used = 0
    for index in indices:
        gap = len(separator) if parts else 0
        remaining = max_chars - used - gap
        if remaining <= 0:
            break
        part = chunks[index][:remaining]
        parts.append(part)
        used += gap + len(part)
    return separator.join(parts)


class ContextBuilder:
    """Budgeted context assembly for quiz generation."""

    def __init__(self, max_chars: int = 12000) -> None:
        self._max_chars = max_chars

    def build(self, chunks: list[str]) -> str:
        return build_context(chunks, self._max_chars)
