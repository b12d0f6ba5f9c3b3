"""Embedding configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, Field

NormType = Literal["L2", "L1", "none"]


class EmbeddingConfig(BaseModel):
    """Embedding provider and parameters."""

    strategy: str = Field(..., description="openai|mock")
    model: str = Field(..., description="Model identifier")
    dimensions: int | None = Field(default=None, ge=1, description="Requested vector size, when the model supports it")
    normalize: bool = Field(default=False)
    normalization_type: NormType = Field(default="L2", description="L2|L1|none")
    batch_size: int = Field(default=100, ge=1)
    api_key: str | None = Field(default=None, description="OpenAI API key when strategy is openai")
