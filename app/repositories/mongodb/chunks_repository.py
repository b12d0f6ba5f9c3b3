"""Async writes to the chunks collection. One stored chunk set per chunking method."""

from typing import Any

from pymongo.errors import PyMongoError

from app.config.logging import get_logger
from app.repositories.mongodb.base import _translate_pymongo_error, chunks_collection

logger = get_logger(__name__)


async def replace_chunks_for_method(method: str, chunk_docs: list[dict[str, Any]]) -> tuple[int, int]:
    """
    Delete every stored chunk produced by `method`, then insert `chunk_docs`.
    Returns (deleted_count, inserted_count).
    """
    coll = chunks_collection()
    try:
        deleted = await coll.delete_many({"method": method})
        inserted = 0
        if chunk_docs:
            # insert_many mutates its input by adding _id
            result = await coll.insert_many([dict(d) for d in chunk_docs], ordered=True)
            inserted = len(result.inserted_ids)
    except PyMongoError as e:
        raise _translate_pymongo_error(e, "replace chunks") from e
    logger.info(
        "Stored chunks",
        extra={"method": method, "deleted": deleted.deleted_count, "inserted": inserted},
    )
    return deleted.deleted_count, inserted


async def list_chunks(method: str | None = None, limit: int = 100) -> list[dict[str, Any]]:
    """Return stored chunks in document order, optionally for one method only."""
    query: dict[str, Any] = {} if method is None else {"method": method}
    coll = chunks_collection()
    try:
        cursor = coll.find(query, {"_id": 0}).sort([("method", 1), ("chunk_index", 1)]).limit(limit)
        return [doc async for doc in cursor]
    except PyMongoError as e:
        raise _translate_pymongo_error(e, "list chunks") from e
