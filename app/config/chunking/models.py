"""Chunking configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, Field

ChunkingMethod = Literal["none", "fixed", "delimiter", "recursive", "semantic"]


class ChunkingConfig(BaseModel):
    """
    Chunking method and parameters. Ranges are checked by the strategies themselves
    so that bad values surface as InvalidParameterError before any chunk is produced.
    """

    method: ChunkingMethod = Field(..., description="none|fixed|delimiter|recursive|semantic")
    chunk_size: int = Field(default=200, description="Window size (fixed) or max chunk size (recursive/semantic)")
    overlap: int = Field(default=50, description="Characters repeated between consecutive fixed windows")
    delimiter: str = Field(default="\n\n", description="Literal separator for delimiter chunking")
