"""No chunking: the whole document is a single chunk."""

from app.config.chunking.models import ChunkingConfig


def chunk_none(text: str) -> list[str]:
    """Return the text unchanged as the only chunk. Empty text yields [""]."""
    return [text]


def none_chunks(text: str, config: ChunkingConfig) -> list[str]:
    return chunk_none(text)
