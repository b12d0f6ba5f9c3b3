"""POST /api/embeddings/generate: embed chunks and store the vectors in MongoDB."""

from fastapi import APIRouter, HTTPException

from app.config.embedding.static import resolve_embedding_config
from app.controllers.schema.embed import EmbeddingItem, EmbedRequest, EmbedResponse
from app.repositories.mongodb.base import RepositoryError
from app.services.embedder.pipeline import run_embed_pipeline

router = APIRouter(prefix="/api/embeddings", tags=["embedding"])


@router.post("/generate", response_model=EmbedResponse)
async def generate_embeddings(body: EmbedRequest) -> EmbedResponse:
    """Embed the given chunks with the active embedding profile. Existing vectors for these ids are replaced."""
    if not body.chunks:
        raise HTTPException(status_code=400, detail="Valid chunks array is required")

    try:
        overrides = body.embedding_config.model_dump(exclude_none=True) if body.embedding_config else None
        config = resolve_embedding_config("active", overrides)
        records = await run_embed_pipeline(
            [{"chunk_id": c.id, "text": c.text} for c in body.chunks],
            config,
        )
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail="Storage temporarily unavailable") from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return EmbedResponse(
        embeddings=[
            EmbeddingItem(id=r["chunk_id"], text=r["text"], dimensions=r["dimensions"]) for r in records
        ]
    )
