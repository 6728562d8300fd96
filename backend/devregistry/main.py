"""Developer Registry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DeveloperRegistryError → {"message", "errorCode"}
    - CORS configured from settings (not hardcoded)
    - Every request logged once by the access-log middleware
    - Database initialized and schema verified on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module wiring-only
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devregistry.api.error_handlers import register_error_handlers
from devregistry.api.routes import developers, health
from devregistry.config import get_settings
from devregistry.infrastructure.database import init_db
from devregistry.infrastructure.observability import (
    register_request_logging, setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.ensure_schema(create=settings.database_create_schema)
    logger.info("Developer Registry API started")
    yield
    await manager.dispose()
    logger.info("Developer Registry API shutting down")


app = FastAPI(
    title="Developer Registry API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(developers.router)

register_error_handlers(app)
register_request_logging(app)
