"""Mock embedding strategy for tests and offline demos. Produces deterministic fake vectors."""

import hashlib

from app.config.embedding.models import EmbeddingConfig
from app.services.embedder.base import BaseEmbeddingStrategy

MOCK_DEFAULT_DIM = 384


class MockEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Deterministic fake embeddings: the same text always maps to the same vector,
    regardless of batch position or interpreter hash seed.
    """

    @property
    def strategy_name(self) -> str:
        return "mock"

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        dim = config.dimensions or MOCK_DEFAULT_DIM
        result: list[list[float]] = []
        for t in texts:
            seed = int.from_bytes(hashlib.sha256(t.encode("utf-8")).digest()[:4], "big")
            result.append([float((seed + j * 7919) % 1000) / 1000.0 + 0.001 for j in range(dim)])
        return result
