"""
Recursive chunking: paragraphs first, then sentences, then a space near the midpoint.
Every chunk ends up no longer than max_chunk_size.
"""

import re

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.errors import InvalidParameterError

PARAGRAPH_SEPARATOR = "\n\n"
# Terminal punctuation stays with the preceding sentence
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
# A backward break closer to the start than this fraction of max_chunk_size is rejected
_MIN_BACKWARD_FRACTION = 0.25


def _midpoint_split(text: str, max_chunk_size: int) -> int:
    """Pick a break index for text with no paragraph or sentence boundary."""
    midpoint = len(text) // 2
    split_point = text.rfind(" ", 0, midpoint + 1)
    if split_point == -1 or split_point < max_chunk_size * _MIN_BACKWARD_FRACTION:
        split_point = text.find(" ", midpoint)
    if split_point == -1:
        split_point = midpoint
    return split_point


def _split_into(text: str, max_chunk_size: int, out: list[str]) -> None:
    if not text.strip():
        return
    if len(text) <= max_chunk_size:
        out.append(text)
        return

    paragraphs = text.split(PARAGRAPH_SEPARATOR)
    if len(paragraphs) > 1:
        for p in paragraphs:
            _split_into(p, max_chunk_size, out)
        return

    sentences = _SENTENCE_BOUNDARY.split(text)
    if len(sentences) > 1:
        for s in sentences:
            _split_into(s, max_chunk_size, out)
        return

    split_point = _midpoint_split(text, max_chunk_size)
    _split_into(text[:split_point], max_chunk_size, out)
    _split_into(text[split_point:].strip(), max_chunk_size, out)


def chunk_recursive(text: str, max_chunk_size: int = 200) -> list[str]:
    """
    Split text hierarchically until every piece fits max_chunk_size. Order of the
    returned chunks follows the text. Blank fragments produced by splitting are dropped.
    """
    if max_chunk_size <= 0:
        raise InvalidParameterError(f"max_chunk_size must be positive, got {max_chunk_size}")
    chunks: list[str] = []
    _split_into(text, max_chunk_size, chunks)
    return chunks


def recursive_chunks(text: str, config: ChunkingConfig) -> list[str]:
    return chunk_recursive(text, config.chunk_size)
