"""Paragraph-greedy chunking: whole paragraphs are packed together up to a size limit."""

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.errors import InvalidParameterError

PARAGRAPH_SEPARATOR = "\n\n"


def chunk_semantic(text: str, max_chunk_size: int = 200) -> list[str]:
    """
    Accumulate consecutive paragraphs (joined by a blank line) until the next one would
    push the accumulated text past max_chunk_size. Paragraphs are never split, so a single
    paragraph longer than the limit becomes its own oversized chunk.
    """
    if max_chunk_size <= 0:
        raise InvalidParameterError(f"max_chunk_size must be positive, got {max_chunk_size}")
    paragraphs = [p for p in text.split(PARAGRAPH_SEPARATOR) if p.strip()]
    chunks: list[str] = []
    current = ""
    for paragraph in paragraphs:
        # Separator is not counted against the limit
        if current and len(current) + len(paragraph) > max_chunk_size:
            chunks.append(current)
            current = paragraph
        elif current:
            current += PARAGRAPH_SEPARATOR + paragraph
        else:
            current = paragraph
    if current:
        chunks.append(current)
    return chunks


def semantic_chunks(text: str, config: ChunkingConfig) -> list[str]:
    return chunk_semantic(text, config.chunk_size)
