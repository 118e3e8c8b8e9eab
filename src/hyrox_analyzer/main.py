"""FastAPI application for the HYROX Analyzer."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .api.deps import get_analysis_service
from .api.routes import analysis, training
from .api.exception_handlers import register_exception_handlers


settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    service = get_analysis_service()
    logger.info(f"Starting HYROX Analyzer v{__version__}")
    logger.info(
        f"AI enrichment: {'enabled' if service.enrichment_enabled else 'disabled'} "
        f"(timeout {settings.enrichment_timeout_seconds}s)"
    )
    yield
    # Shutdown
    logger.info("Shutting down HYROX Analyzer")


app = FastAPI(
    title="HYROX Analyzer API",
    description="HYROX race analysis, benchmarking and training plans",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(analysis.router, prefix="/api/v1/analysis", tags=["analysis"])
app.include_router(training.router, prefix="/api/v1/training", tags=["training"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "HYROX Analyzer API",
        "version": __version__,
        "status": "healthy",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
