"""Async MongoDB client with connection pooling, timeouts, and graceful shutdown using Motor."""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.config.logging import get_logger
from app.config.settings import get_settings
from app.config.storage.mongo import get_mongo_config

logger = get_logger(__name__)

_client: AsyncIOMotorClient | None = None
_default_db: AsyncIOMotorDatabase | None = None


def get_mongo_client() -> AsyncIOMotorClient:
    """Return the shared async MongoDB client. Created lazily; no I/O happens until first command."""
    global _client
    if _client is None:
        cfg = get_mongo_config()
        _client = AsyncIOMotorClient(
            cfg["uri"],
            appname=get_settings().app_name,
            connectTimeoutMS=cfg["connect_timeout_ms"],
            serverSelectionTimeoutMS=cfg["server_selection_timeout_ms"],
            maxPoolSize=cfg["max_pool_size"],
        )
        logger.info(
            "MongoDB client created",
            extra={"database": cfg["database"], "max_pool_size": cfg["max_pool_size"]},
        )
    return _client


def get_database() -> AsyncIOMotorDatabase:
    """Return the demo database."""
    global _default_db
    if _default_db is None:
        _default_db = get_mongo_client()[get_mongo_config()["database"]]
    return _default_db


def close_mongo_client() -> None:
    """Close the MongoDB client on shutdown. Safe to call when no client was created."""
    global _client, _default_db
    if _client is None:
        return
    _client.close()
    logger.info("MongoDB client closed")
    _client = None
    _default_db = None
