"""Async CRUD and vector search on the embeddings collection."""

from typing import Any

from pymongo.errors import PyMongoError

from app.config.logging import get_logger
from app.repositories.mongodb.base import _translate_pymongo_error, embeddings_collection

logger = get_logger(__name__)


async def replace_embeddings(embedding_docs: list[dict[str, Any]]) -> int:
    """
    Delete existing embeddings for the chunk ids in `embedding_docs`, then insert them.
    Returns the number inserted.
    """
    if not embedding_docs:
        return 0
    coll = embeddings_collection()
    chunk_ids = [d["chunk_id"] for d in embedding_docs]
    try:
        await coll.delete_many({"chunk_id": {"$in": chunk_ids}})
        result = await coll.insert_many([dict(d) for d in embedding_docs], ordered=True)
    except PyMongoError as e:
        raise _translate_pymongo_error(e, "replace embeddings") from e
    return len(result.inserted_ids)


async def aggregate_embeddings(pipeline: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Run an aggregation pipeline (e.g. $vectorSearch) on the embeddings collection."""
    coll = embeddings_collection()
    try:
        cursor = coll.aggregate(pipeline)
        results = [doc async for doc in cursor]
    except PyMongoError as e:
        raise _translate_pymongo_error(e, "aggregate embeddings") from e
    logger.debug("Aggregation finished", extra={"stages": len(pipeline), "results": len(results)})
    return results
