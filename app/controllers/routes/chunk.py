"""POST /api/chunks: chunk text with one method, store and return the chunks. GET lists stored chunks."""

from fastapi import APIRouter, HTTPException, Query

from app.config.chunking.static import resolve_chunking_config
from app.config.logging import get_logger
from app.controllers.schema.chunk import ChunkItem, ChunkRequest, ChunkResponse
from app.repositories.mongodb.base import RepositoryError
from app.repositories.mongodb.chunks_repository import list_chunks, replace_chunks_for_method
from app.services.chunking.chunker import build_chunk_records

logger = get_logger(__name__)

router = APIRouter(prefix="/api/chunks", tags=["chunking"])


@router.post("", response_model=ChunkResponse)
async def create_chunks(body: ChunkRequest) -> ChunkResponse:
    """
    Chunk `text` with `method` using that method's default parameters.
    Chunks previously stored for the same method are replaced.
    """
    if not body.text:
        raise HTTPException(status_code=400, detail="Text is required")

    try:
        config = resolve_chunking_config(body.method)
        records = build_chunk_records(body.text, config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    try:
        await replace_chunks_for_method(config.method, records)
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail="Storage temporarily unavailable") from e

    logger.info("Chunked text", extra={"method": config.method, "chunks": len(records), "chars": len(body.text)})
    return ChunkResponse(
        chunks=[ChunkItem(id=r["chunk_id"], text=r["text"], method=r["method"]) for r in records]
    )


@router.get("", response_model=ChunkResponse)
async def get_chunks(
    method: str | None = Query(default=None, description="Only chunks produced by this method"),
    limit: int = Query(default=100, ge=1, le=1000),
) -> ChunkResponse:
    """Return stored chunks in document order."""
    try:
        docs = await list_chunks(method=method, limit=limit)
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail="Storage temporarily unavailable") from e
    return ChunkResponse(
        chunks=[ChunkItem(id=d["chunk_id"], text=d["text"], method=d["method"]) for d in docs]
    )
