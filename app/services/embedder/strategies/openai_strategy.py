"""OpenAI Embeddings API strategy."""

from openai import OpenAI

from app.config.embedding.models import EmbeddingConfig
from app.config.settings import get_settings
from app.services.embedder.base import BaseEmbeddingStrategy

# Inputs accepted per embeddings request
_MAX_BATCH = 2048


class OpenAIEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    OpenAI Embeddings API (text-embedding-3-small by default).
    API key from config.api_key or settings.openai_api_key.
    """

    @property
    def strategy_name(self) -> str:
        return "openai"

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        api_key = config.api_key or get_settings().openai_api_key or None
        if not api_key:
            raise ValueError("OpenAI API key is required (set in config or OPENAI_API_KEY)")
        client = OpenAI(api_key=api_key)
        extra = {"dimensions": config.dimensions} if config.dimensions else {}
        batch_size = min(config.batch_size, _MAX_BATCH)
        vectors: list[list[float]] = []
        for i in range(0, len(texts), batch_size):
            batch = texts[i : i + batch_size]
            response = client.embeddings.create(model=config.model, input=batch, **extra)
            by_index = {e.index: e.embedding for e in response.data}
            vectors.extend(by_index[j] for j in range(len(batch)))
        return vectors
