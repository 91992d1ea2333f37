"""Products API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a JSON response
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via the lifespan context manager;
      a failed initial connection is logged, not fatal
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from products_api import __version__
from products_api.api.error_handlers import register_error_handlers
from products_api.api.routes import health, products
from products_api.config import get_settings
from products_api.infrastructure.database import close_db, init_db
from products_api.infrastructure.observability import (
    RequestLoggingMiddleware, setup_logging,
)

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Products", "description": "API operations related to products"},
    {"name": "health", "description": "Liveness and readiness probes"},
]


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
    if settings.database_auto_create:
        try:
            await manager.create_all()
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Could not connect to the database: {e}")
    logger.info(f"Products API started on port {settings.port}")
    yield
    await close_db()
    logger.info("Products API shutting down")


app = FastAPI(
    title="REST API FastAPI / Python",
    description="API Docs for products",
    version=__version__,
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(products.router)

register_error_handlers(app)
