"""GET /api/setup: prepare collections and return the sample document. GET /api/setup/sampleText: handbook sample."""

from fastapi import APIRouter
from pymongo.errors import PyMongoError

from app.config.logging import get_logger
from app.config.settings import get_settings
from app.controllers.schema.setup import SampleTextResponse, SetupResponse
from app.resources.mongo.client import get_database
from app.resources.mongo.indexes import create_indexes, has_search_index
from app.services.samples import HANDBOOK_TEXT, SAMPLE_TEXT

logger = get_logger(__name__)

router = APIRouter(prefix="/api/setup", tags=["setup"])


@router.get("", response_model=SetupResponse)
async def setup() -> SetupResponse:
    """
    Create regular indexes and check for the Atlas vector index. Storage problems are
    logged but never hide the sample text from the client.
    """
    index_ready = False
    try:
        db = get_database()
        await create_indexes(db)
        index_ready = await has_search_index(db, get_settings().vector_index_name)
    except PyMongoError as e:
        logger.warning("Setup could not prepare MongoDB", extra={"error_type": type(e).__name__})
    if not index_ready:
        logger.info("Vector search index must be created in MongoDB Atlas before searching")
    return SetupResponse(text=SAMPLE_TEXT, vector_index_ready=index_ready)


@router.get("/sampleText", response_model=SampleTextResponse)
async def sample_text() -> SampleTextResponse:
    """Return the policy handbook document the demo UI loads on start. No storage access."""
    return SampleTextResponse(text=HANDBOOK_TEXT)
