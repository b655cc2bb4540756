"""Continent API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ContinentApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Continent table built on startup via lifespan, before any request is served

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Table and handler are lru_cached, so requests served without lifespan
      (e.g. ASGITransport in tests) still get the same single instance
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from continent_api import __version__
from continent_api.api.error_handlers import register_error_handlers
from continent_api.infrastructure.observability import setup_logging
from continent_api.config import get_settings
from continent_api.services.lookup_continent import get_lookup_handler
from continent_api.api.routes import health, continents

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    handler = get_lookup_handler()
    logger.info(
        f"Continent API started with {len(handler.table)} continents",
    )
    yield
    logger.info("Continent API shutting down")


app = FastAPI(
    title="Continent API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(continents.router)

register_error_handlers(app)
