"""FastAPI app entry: config, logging, health, and graceful shutdown."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.config.logging import configure_logging, get_logger
from app.config.settings import get_settings
from app.controllers.routes.chunk import router as chunk_router
from app.controllers.routes.embed import router as embed_router
from app.controllers.routes.search import router as search_router
from app.controllers.routes.setup import router as setup_router
from app.resources.mongo.client import close_mongo_client, get_database
from app.resources.mongo.indexes import create_indexes
from app.resources.mongo.session import ping_mongo

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and indexes. Shutdown: close the MongoDB client."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    try:
        await create_indexes(get_database())
    except PyMongoError as e:
        # Chunking works without storage; routes report 503 when they need it
        logger.error("Failed to create MongoDB indexes on startup", extra={"error": str(e)})
    yield
    logger.info("Application shutting down")
    close_mongo_client()
    logger.info("Shutdown complete")


app = FastAPI(
    title="RAG Chunking Demo",
    description="Chunk text, embed chunks, and search them with MongoDB Atlas Vector Search",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(setup_router)
app.include_router(chunk_router)
app.include_router(embed_router)
app.include_router(search_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up. Does not check dependencies."""
    return {"status": "ok"}


@app.get("/ready")
async def ready() -> JSONResponse:
    """Readiness: verifies MongoDB connectivity."""
    mongo = await ping_mongo()
    ok = mongo.get("ok", False)
    body = {
        "status": "ok" if ok else "degraded",
        "mongo": {"ok": ok, "error": mongo.get("error")},
    }
    return JSONResponse(content=body, status_code=200 if ok else 503)


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: connection failures and timeouts get clear, non-leaking messages."""
    exc_name = type(exc).__name__
    if "Connection" in exc_name or "Timeout" in exc_name or "connection" in str(type(exc).__module__).lower():
        logger.warning("Connection or timeout error", extra={"error": exc_name})
        return JSONResponse(
            content={"detail": "A dependency is temporarily unavailable. Please retry later."},
            status_code=503,
        )
    logger.exception("Unhandled error")
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
