"""Routes for managing the product catalog."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from src.api.auth import require_api_key
from src.errors import ValidationError
from src.models.product import Product, ProductFields, ProductPage, ProductStats
from src.services.product_store import ProductStore, get_product_store
from src.services.query import ProductQuery, query_products
from src.services.stats import compute_stats
from src.services.validation import validate_product_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])

StoreDependency = Annotated[ProductStore, Depends(get_product_store)]


async def validated_product(request: Request) -> ProductFields:
    """Parse the request body and run the product field rules on it."""

    if not await request.body():
        return validate_product_payload({})
    try:
        payload = await request.json()
    except ValueError as error:
        raise ValidationError(message="Malformed JSON body") from error

    logger.debug("Received payload: %s", payload)
    return validate_product_payload(payload)


FieldsDependency = Annotated[ProductFields, Depends(validated_product)]


@router.get(
    "",
    response_model=ProductPage,
    summary="List products with optional filtering and pagination",
)
async def list_products(
    store: StoreDependency,
    category: str | None = None,
    search: str | None = None,
    page: str | None = None,
    limit: str | None = None,
) -> ProductPage:
    query = ProductQuery.from_params(
        category=category,
        search=search,
        page=page,
        limit=limit,
    )
    return query_products(store.list_products(), query)


# Declared ahead of "/{product_id}" so "stats" is never taken for an id.
@router.get(
    "/stats",
    response_model=ProductStats,
    summary="Aggregate statistics over the whole catalog",
)
async def product_stats(store: StoreDependency) -> ProductStats:
    return compute_stats(store.list_products())


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, store: StoreDependency) -> Product:
    return store.get(product_id)


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_key)],
    summary="Create a product",
)
async def create_product(fields: FieldsDependency, store: StoreDependency) -> Product:
    return store.create(fields)


@router.put(
    "/{product_id}",
    response_model=Product,
    dependencies=[Depends(require_api_key)],
    summary="Replace every field of a product",
)
async def replace_product(
    product_id: str,
    fields: FieldsDependency,
    store: StoreDependency,
) -> Product:
    return store.replace(product_id, fields)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_api_key)],
    response_class=Response,
    summary="Delete a product",
)
async def delete_product(product_id: str, store: StoreDependency) -> Response:
    store.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
