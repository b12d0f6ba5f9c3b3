"""Scale provider vectors before storage so every stored embedding has the norm the Atlas index expects."""

import math
from typing import Callable

from app.config.embedding.models import EmbeddingConfig, NormType

_NORM_FUNCTIONS: dict[str, Callable[[list[float]], float]] = {
    "L2": lambda vec: math.sqrt(math.fsum(x * x for x in vec)),
    "L1": lambda vec: math.fsum(abs(x) for x in vec),
}


def normalize_vector(vec: list[float], norm_type: NormType) -> tuple[list[float], float]:
    """
    Return (unit vector under norm_type, original norm). 'none' and zero vectors
    come back as an unchanged copy with norm 0.0.
    """
    norm_fn = _NORM_FUNCTIONS.get(norm_type)
    if norm_fn is None:
        return list(vec), 0.0
    norm = norm_fn(vec)
    if norm == 0.0:
        return list(vec), 0.0
    return [x / norm for x in vec], norm


def normalize_embeddings(vectors: list[list[float]], config: EmbeddingConfig) -> list[tuple[list[float], float]]:
    """Apply the config's normalization to each vector; a no-op copy when normalize is off."""
    norm_type: NormType = config.normalization_type if config.normalize else "none"
    return [normalize_vector(v, norm_type) for v in vectors]
