"""Fixed-size character chunking with overlap."""

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.errors import InvalidParameterError


def chunk_fixed(text: str, chunk_size: int = 200, overlap: int = 50) -> list[str]:
    """
    Slide a window of chunk_size characters over the text, stepping (chunk_size - overlap)
    each time. Windows that are whitespace-only are dropped; kept windows are not trimmed.
    The last window may be shorter than chunk_size.
    """
    if chunk_size <= 0:
        raise InvalidParameterError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0 or overlap >= chunk_size:
        raise InvalidParameterError(
            f"overlap must be in [0, chunk_size), got overlap={overlap} chunk_size={chunk_size}"
        )
    step = chunk_size - overlap
    chunks: list[str] = []
    i = 0
    while i < len(text):
        window = text[i : i + chunk_size]
        if window.strip():
            chunks.append(window)
        i += step
    return chunks


def fixed_chunks(text: str, config: ChunkingConfig) -> list[str]:
    return chunk_fixed(text, config.chunk_size, config.overlap)
