"""
Async embedding pipeline: chunk texts → batch embed → normalize → persist.
Each stored record replaces any earlier embedding of the same chunk id.
"""

from typing import Any

from fastapi.concurrency import run_in_threadpool

from app.config.embedding.models import EmbeddingConfig
from app.config.logging import get_logger
from app.repositories.mongodb.embeddings_repository import replace_embeddings
from app.services.embedder.base import BaseEmbeddingStrategy
from app.services.embedder.normalization import normalize_embeddings
from app.services.embedder.strategies import get_embedding_strategy
from app.utils.time import utc_now

logger = get_logger(__name__)


def _strategy_for(config: EmbeddingConfig) -> BaseEmbeddingStrategy:
    strategy = get_embedding_strategy(config.strategy)
    if strategy is None:
        raise ValueError(f"Unknown embedding strategy: {config.strategy!r}")
    return strategy


def embed_texts(texts: list[str], config: EmbeddingConfig) -> list[tuple[list[float], float]]:
    """
    Embed texts with the configured strategy. Returns (vector, original_norm) per text;
    norm is 0.0 when normalization is off.
    """
    vectors = _strategy_for(config).embed(texts, config)
    if len(vectors) != len(texts):
        raise RuntimeError(f"Embedding provider returned {len(vectors)} vectors for {len(texts)} texts")
    return normalize_embeddings(vectors, config)


def embed_query(query: str, config: EmbeddingConfig) -> list[float]:
    """Embed a single search query the same way chunks are embedded."""
    vector, _ = embed_texts([query], config)[0]
    return vector


async def run_embed_pipeline(
    chunks: list[dict[str, Any]],
    config: EmbeddingConfig,
) -> list[dict[str, Any]]:
    """
    Embed `chunks` (each with 'chunk_id' and 'text') and store one embedding record per chunk.
    Returns the stored records. Raises ValueError for a misconfigured provider and
    RepositoryError when storage fails.
    """
    if not chunks:
        return []
    texts = [c["text"] for c in chunks]
    # Provider SDK calls are blocking; keep them off the event loop
    embedded = await run_in_threadpool(embed_texts, texts, config)
    now = utc_now()
    records: list[dict[str, Any]] = []
    for chunk, (vector, norm) in zip(chunks, embedded):
        records.append({
            "chunk_id": chunk["chunk_id"],
            "text": chunk["text"],
            "embedding": vector,
            "dimensions": len(vector),
            "model": config.model,
            "strategy": config.strategy,
            "norm": norm,
            "created_at": now,
        })
    inserted = await replace_embeddings(records)
    logger.info(
        "Embeddings stored",
        extra={"count": inserted, "model": config.model, "strategy": config.strategy},
    )
    return records
