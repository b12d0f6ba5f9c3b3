"""Base embedding strategy contract."""

from abc import ABC, abstractmethod

from app.config.embedding.models import EmbeddingConfig


class BaseEmbeddingStrategy(ABC):
    """
    Abstract embedding provider. Each strategy returns one vector per input text, in order,
    and does not normalize (the embedding pipeline does that when configured).
    """

    @abstractmethod
    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'openai'."""
        ...
