import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from services.readiness_engine.models import CatalogConfigurationError
from src.core.config import get_catalog, settings
from src.core.logging_config import setup_logging
from src.routers import assessment as assessment_router

# Configure logging VERY early
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Catalog problems are fatal: fail startup rather than the first submission.
    catalog = get_catalog()
    logger.info(f"Serving question catalog {catalog.version} ({len(catalog)} questions)")
    yield


app = FastAPI(title="Smart City Infrastructure Readiness Assessment", lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include Routers ---
app.include_router(assessment_router.router, prefix="/api/v1", tags=["assessment"])


@app.get("/", tags=["Health Check"])
async def read_root():
    """
    Root endpoint for basic health check.
    """
    return {"status": "ok", "message": "Smart City Infrastructure Readiness Assessment is running."}


@app.get("/health", tags=["Health Check"])
async def health_check():
    """Reports whether the configured question catalog loads."""
    try:
        catalog = get_catalog()
    except CatalogConfigurationError as e:
        logger.error(f"Catalog health check failed: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=f"Question catalog error: {e}")
    return {"status": "ok", "catalog_version": catalog.version, "question_count": len(catalog)}
