"""Shared async MongoDB access patterns and common error handling."""

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from app.config.logging import get_logger
from app.resources.mongo.client import get_database

logger = get_logger(__name__)

CHUNKS_COLLECTION = "chunks"
EMBEDDINGS_COLLECTION = "embeddings"


class RepositoryError(Exception):
    """Raised when a repository operation fails after handling PyMongo errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


def _translate_pymongo_error(e: PyMongoError, context: str) -> RepositoryError:
    """Wrap PyMongo errors into a non-leaking RepositoryError."""
    logger.warning(
        "MongoDB operation failed",
        extra={"context": context, "error_type": type(e).__name__},
    )
    return RepositoryError(f"Dependency temporarily unavailable: {context}", cause=e)


def get_collection(name: str) -> AsyncIOMotorCollection:
    """Return the named collection from the default database."""
    return get_database()[name]


def chunks_collection() -> AsyncIOMotorCollection:
    return get_collection(CHUNKS_COLLECTION)


def embeddings_collection() -> AsyncIOMotorCollection:
    return get_collection(EMBEDDINGS_COLLECTION)
