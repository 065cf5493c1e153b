"""Forman API server.

Run locally with ``python -m forman.main`` (auto-reload in development).
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from forman import __version__
from forman.api.errors import register_error_handlers
from forman.api.pricing import router as pricing_router
from forman.config import settings
from forman.log import configure_logging

configure_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Imported lazily so the pricing routes work without a database driver loaded
    from forman.db.engine import db_lifespan

    logger.info("Forman %s starting (env=%s)", __version__, settings.environment)
    async with db_lifespan():
        yield
    logger.info("Forman stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application with routes and error handlers."""
    application = FastAPI(
        title="Forman API",
        description="Quoting and pricing for roofing contractors",
        version=__version__,
        lifespan=lifespan,
    )
    application.include_router(pricing_router)
    register_error_handlers(application)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "ok", "environment": settings.environment, "version": __version__}

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "forman.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
