"""Id generation for chunks. Deterministic so that re-chunking the same text yields the same ids."""

import hashlib


def generate_chunk_id(method: str, chunk_index: int, chunk_hash: str) -> str:
    """Generate a deterministic chunk_id from method, index, and hash."""
    payload = f"{method}:{chunk_index}:{chunk_hash}"
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:24]
    return f"chunk_{digest}"
