"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.errors import install_error_handlers
from src.api.middleware import install_middleware
from src.api.routes import include_api_routes
from src.config import settings
from src.services.product_store import get_product_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events."""

    store = get_product_store()
    logger.info(
        "Products API ready (environment=%s, products=%d)",
        settings.ENVIRONMENT,
        store.count(),
    )

    yield

    logger.info("Products API shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Products API",
        description="In-memory product catalog with filtering and statistics",
        version="1.0.0",
        lifespan=lifespan,
    )

    _configure_cors(app)
    install_middleware(app)
    install_error_handlers(app)
    include_api_routes(app)

    return app


def _configure_cors(app: FastAPI) -> None:
    """Allow broad access in non-production environments."""

    if settings.is_production:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
