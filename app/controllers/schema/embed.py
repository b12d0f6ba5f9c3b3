"""Request/response schemas for POST /api/embeddings/generate."""

from pydantic import BaseModel, ConfigDict, Field


class EmbedChunk(BaseModel):
    id: str = Field(..., min_length=1, description="Chunk id returned by POST /api/chunks")
    text: str


class EmbeddingOverrides(BaseModel):
    """Per-request tuning of the active profile. Provider, model and credentials are not overridable."""

    model_config = ConfigDict(extra="forbid")

    dimensions: int | None = Field(default=None, ge=1, le=3072, description="Requested vector size")
    batch_size: int | None = Field(default=None, ge=1, le=2048, description="Texts per provider request")


class EmbedRequest(BaseModel):
    """POST /api/embeddings/generate request body."""

    chunks: list[EmbedChunk] | None = Field(default=None, description="Chunks to embed")
    embedding_config: EmbeddingOverrides | None = Field(default=None, description="Optional dimensions/batch_size")


class EmbeddingItem(BaseModel):
    id: str
    text: str
    dimensions: int = Field(..., ge=0)


class EmbedResponse(BaseModel):
    """POST /api/embeddings/generate response body. Vectors are stored, not returned."""

    embeddings: list[EmbeddingItem] = Field(default_factory=list)
