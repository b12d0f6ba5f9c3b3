"""Chunking strategy implementations, keyed by method name."""

from typing import Callable

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.strategies.delimiter import chunk_delimiter, delimiter_chunks
from app.services.chunking.strategies.fixed_size import chunk_fixed, fixed_chunks
from app.services.chunking.strategies.no_chunking import chunk_none, none_chunks
from app.services.chunking.strategies.recursive import chunk_recursive, recursive_chunks
from app.services.chunking.strategies.semantic import chunk_semantic, semantic_chunks

STRATEGY_REGISTRY: dict[str, Callable[[str, ChunkingConfig], list[str]]] = {
    "none": none_chunks,
    "fixed": fixed_chunks,
    "delimiter": delimiter_chunks,
    "recursive": recursive_chunks,
    "semantic": semantic_chunks,
}

__all__ = [
    "STRATEGY_REGISTRY",
    "chunk_delimiter",
    "chunk_fixed",
    "chunk_none",
    "chunk_recursive",
    "chunk_semantic",
    "get_strategy_fn",
]


def get_strategy_fn(method: str):
    """Return the chunking function for the given method name, or None."""
    return STRATEGY_REGISTRY.get(method)
