"""JUtils API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map JUtilsError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jutils.infrastructure.observability import setup_logging
from jutils.config import get_settings
from jutils.api.error_handlers import register_error_handlers
from jutils.api.routes import health, query, text, visual

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("JUtils API started")
    yield
    logger.info("JUtils API shutting down")


app = FastAPI(
    title="JUtils API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(text.router)
app.include_router(query.router)
app.include_router(visual.router)

register_error_handlers(app)
