"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Environment must be imported first
from ..config.environment import IS_PRODUCTION_ENVIRONMENT
from ..config.cors import CORS_CONFIG
from ..utils.logging_config import setup_logging
from .. import __version__
from ..db import db
from .routes import events, health

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    try:
        db.ensure_tables_exist()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise
    yield
    db.dispose()

def create_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Civic Events API",
        description="Read API for town halls, forums, meetings, rallies, debates and conferences",
        version=__version__,
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )

    app.add_middleware(CORSMiddleware, **CORS_CONFIG)

    # Health check router without prefix
    app.include_router(health.router)
    app.include_router(events.router, prefix="/api")

    return app

# Create the application instance
app = create_application()
