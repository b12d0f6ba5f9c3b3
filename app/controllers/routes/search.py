"""POST /api/search: vector search over stored chunk embeddings."""

from fastapi import APIRouter, HTTPException

from app.config.embedding.static import resolve_embedding_config
from app.controllers.schema.search import SearchHit, SearchRequest, SearchResponse
from app.repositories.mongodb.base import RepositoryError
from app.services.retrieval.vector_search import search_chunks

router = APIRouter(prefix="/api/search", tags=["retrieval"])


@router.post("", response_model=SearchResponse)
async def search(body: SearchRequest) -> SearchResponse:
    """Embed the query with the active embedding profile and return the nearest chunks."""
    if not body.query:
        raise HTTPException(status_code=400, detail="Query is required")

    try:
        config = resolve_embedding_config("active")
        hits = await search_chunks(body.query, config, limit=body.limit, filter_=body.filter)
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail="Vector search temporarily unavailable") from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return SearchResponse(results=[SearchHit.model_validate(h) for h in hits])
