"""Response schema for GET /api/setup."""

from pydantic import BaseModel, Field


class SetupResponse(BaseModel):
    text: str = Field(..., description="Sample document for the chunking demo")
    vector_index_ready: bool = Field(default=False, description="Whether the Atlas vector index was found")


class SampleTextResponse(BaseModel):
    text: str = Field(..., description="Policy handbook sample document")
