"""Request/response schemas for POST /api/search."""

from typing import Any

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """POST /api/search request body."""

    query: str | None = Field(default=None, description="Natural-language query")
    limit: int | None = Field(default=None, ge=1, le=100, description="Number of hits (default from settings)")
    filter: dict[str, Any] | None = Field(default=None, description="Optional $vectorSearch pre-filter")


class SearchHit(BaseModel):
    chunk_id: str | None = None
    text: str | None = None
    score: float


class SearchResponse(BaseModel):
    results: list[SearchHit] = Field(default_factory=list)
