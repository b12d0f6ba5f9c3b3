"""Delimiter chunking: split on a literal separator (blank line by default)."""

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.errors import InvalidParameterError


def chunk_delimiter(text: str, delimiter: str = "\n\n") -> list[str]:
    """Split on every literal occurrence of delimiter, trim each piece, drop empty pieces."""
    if not delimiter:
        raise InvalidParameterError("delimiter must be a non-empty string")
    pieces = (p.strip() for p in text.split(delimiter))
    return [p for p in pieces if p]


def delimiter_chunks(text: str, config: ChunkingConfig) -> list[str]:
    return chunk_delimiter(text, config.delimiter)
