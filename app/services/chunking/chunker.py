"""
Chunker: takes raw text + chunking config and returns chunk texts or chunk records with chunk_hash.
Pure and deterministic; persistence is left to the caller.
"""

import hashlib
import json
from typing import Any

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.errors import InvalidParameterError
from app.services.chunking.strategies import get_strategy_fn
from app.utils.ids import generate_chunk_id
from app.utils.time import utc_now


def compute_chunk_hash(chunk_text: str, method: str, config: ChunkingConfig) -> str:
    """Chunk hash = SHA-256(chunk_text + method + config)."""
    config_canonical = json.dumps(config.model_dump(mode="json"), sort_keys=True)
    payload = f"{chunk_text}|{method}|{config_canonical}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def chunk_text(text: str, config: ChunkingConfig) -> list[str]:
    """Run the strategy selected by config.method. Raises InvalidParameterError for unknown methods."""
    strategy_fn = get_strategy_fn(config.method)
    if strategy_fn is None:
        raise InvalidParameterError(f"Unknown chunking method: {config.method!r}")
    return strategy_fn(text, config)


def build_chunk_records(text: str, config: ChunkingConfig) -> list[dict[str, Any]]:
    """
    Chunk text and build storage records with chunk_id, chunk_hash and position.
    Deterministic ids for the same input + config.
    """
    method = config.method
    chunk_texts = chunk_text(text, config)
    now = utc_now()
    records: list[dict[str, Any]] = []
    for i, piece in enumerate(chunk_texts):
        chunk_hash = compute_chunk_hash(piece, method, config)
        records.append({
            "chunk_id": generate_chunk_id(method, i, chunk_hash),
            "text": piece,
            "method": method,
            "chunk_index": i,
            "chunk_size": config.chunk_size,
            "overlap": config.overlap,
            "chunk_hash": chunk_hash,
            "created_at": now,
        })
    return records
