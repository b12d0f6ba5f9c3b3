"""Embedding strategy implementations."""

from app.services.embedder.base import BaseEmbeddingStrategy
from app.services.embedder.strategies.mock_strategy import MockEmbeddingStrategy
from app.services.embedder.strategies.openai_strategy import OpenAIEmbeddingStrategy

STRATEGY_REGISTRY: dict[str, type[BaseEmbeddingStrategy]] = {
    "openai": OpenAIEmbeddingStrategy,
    "mock": MockEmbeddingStrategy,
}


def get_embedding_strategy(strategy_name: str) -> BaseEmbeddingStrategy | None:
    """Return an instance of the embedding strategy for the given name, or None."""
    cls = STRATEGY_REGISTRY.get(strategy_name)
    if cls is None:
        return None
    return cls()
