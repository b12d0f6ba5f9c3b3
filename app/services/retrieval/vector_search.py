"""Atlas $vectorSearch over stored chunk embeddings."""

from typing import Any

from fastapi.concurrency import run_in_threadpool

from app.config.embedding.models import EmbeddingConfig
from app.config.settings import get_settings
from app.repositories.mongodb.embeddings_repository import aggregate_embeddings
from app.services.embedder.pipeline import embed_query

EMBEDDING_PATH = "embedding"


def build_vector_search_pipeline(
    query_vector: list[float],
    *,
    index_name: str,
    num_candidates: int,
    limit: int,
    filter_: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Return the aggregation pipeline: $vectorSearch then project chunk_id, text and score."""
    stage: dict[str, Any] = {
        "index": index_name,
        "path": EMBEDDING_PATH,
        "queryVector": query_vector,
        # Atlas rejects numCandidates below limit
        "numCandidates": max(num_candidates, limit),
        "limit": limit,
    }
    if filter_:
        stage["filter"] = filter_
    return [
        {"$vectorSearch": stage},
        {
            "$project": {
                "_id": 0,
                "chunk_id": 1,
                "text": 1,
                "score": {"$meta": "vectorSearchScore"},
            }
        },
    ]


async def search_chunks(
    query: str,
    config: EmbeddingConfig,
    limit: int | None = None,
    filter_: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Embed the query and return the nearest stored chunks with their similarity score."""
    settings = get_settings()
    query_vector = await run_in_threadpool(embed_query, query, config)
    pipeline = build_vector_search_pipeline(
        query_vector,
        index_name=settings.vector_index_name,
        num_candidates=settings.vector_num_candidates,
        limit=limit or settings.vector_search_limit,
        filter_=filter_,
    )
    return await aggregate_embeddings(pipeline)
