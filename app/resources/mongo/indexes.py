"""
Regular MongoDB indexes for the chunks and embeddings collections.
The Atlas vector search index on embeddings.embedding is created in Atlas, not here.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.config.logging import get_logger
from app.repositories.mongodb.base import CHUNKS_COLLECTION, EMBEDDINGS_COLLECTION

logger = get_logger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes used by the chunk and embedding repositories. Idempotent."""
    try:
        chunks = db[CHUNKS_COLLECTION]
        await chunks.create_index([("chunk_id", 1)], unique=True)
        await chunks.create_index([("method", 1), ("chunk_index", 1)])
        logger.info("Created indexes for chunks collection")

        embeddings = db[EMBEDDINGS_COLLECTION]
        await embeddings.create_index([("chunk_id", 1)], unique=True)
        logger.info("Created indexes for embeddings collection")
    except Exception as e:
        logger.error("Failed to create MongoDB indexes", extra={"error": str(e), "error_type": type(e).__name__})
        raise


async def has_search_index(db: AsyncIOMotorDatabase, index_name: str) -> bool:
    """Return True if an Atlas search index with the given name exists on the embeddings collection."""
    cursor = db[EMBEDDINGS_COLLECTION].list_search_indexes(name=index_name)
    async for _ in cursor:
        return True
    return False
