"""Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → the documented JSON envelopes
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Every request is logged once by middleware, independent of route outcome
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.error_handlers import register_error_handlers
from catalog.api.request_logging import register_request_logging
from catalog.api.routes import authors, health, papers
from catalog.config import get_settings
from catalog.db.session import create_schema
from catalog.infrastructure.database import close_db, init_db
from catalog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.database_create_schema:
        await create_schema(settings.database_url)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info("Catalog API started")
    yield
    await close_db()
    logger.info("Catalog API shutting down")


app = FastAPI(
    title="Paper Catalog API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_request_logging(app)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(papers.router)
app.include_router(authors.router)

register_error_handlers(app)
