"""System-level routes such as health checks."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from src.config import settings
from src.services.product_store import ProductStore, get_product_store

router = APIRouter(tags=["system"])


@router.get("/", response_class=PlainTextResponse)
async def read_root() -> str:
    """Plain-text landing message pointing at the product endpoints."""

    return "Products API - Use /api/products endpoints"


@router.get("/health")
async def health_check(
    store: Annotated[ProductStore, Depends(get_product_store)],
) -> dict[str, str | int]:
    """Health check endpoint reporting the catalog size."""

    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "products": store.count(),
    }
