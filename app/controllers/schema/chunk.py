"""Request/response schemas for POST /api/chunks."""

from pydantic import BaseModel, Field


class ChunkRequest(BaseModel):
    """POST /api/chunks request body. Parameters for each method come from static.json."""

    text: str | None = Field(default=None, description="Document text to chunk")
    method: str = Field(default="fixed", description="none|fixed|delimiter|recursive|semantic")


class ChunkItem(BaseModel):
    id: str = Field(..., description="Deterministic chunk id")
    text: str
    method: str


class ChunkResponse(BaseModel):
    """POST /api/chunks response body. Chunks in document order."""

    chunks: list[ChunkItem] = Field(default_factory=list)
