"""In-memory product store shared by the API handlers."""

from __future__ import annotations

import logging
import uuid
from threading import RLock

from src.config import settings
from src.errors import ProductNotFoundError
from src.models.product import Product, ProductFields

logger = logging.getLogger(__name__)


def seed_products() -> list[ProductFields]:
    """Return the records every fresh catalog starts with."""

    return [
        ProductFields(
            name="Laptop",
            description="High performance laptop",
            price=999.99,
            category="Electronics",
            in_stock=True,
        ),
        ProductFields(
            name="Smartphone",
            description="Latest smartphone model",
            price=699.99,
            category="Electronics",
            in_stock=True,
        ),
    ]


class ProductStore:
    """Process-local product collection.

    Every operation holds the same lock, so a reader never observes a
    half-applied mutation. Records are immutable; ``list_products`` hands out
    a new list of them which callers may filter or slice freely.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._products: list[Product] = []

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise ProductNotFoundError(product_id)

    def list_products(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def get(self, product_id: str) -> Product:
        with self._lock:
            return self._products[self._index_of(product_id)]

    def create(self, fields: ProductFields) -> Product:
        """Store a new product under a freshly issued id."""

        with self._lock:
            product = Product.from_fields(str(uuid.uuid4()), fields)
            self._products.append(product)

        logger.info("Created product %s (%s)", product.id, product.name)
        logger.debug("Product payload: %s", product.model_dump_json(by_alias=True))
        return product

    def replace(self, product_id: str, fields: ProductFields) -> Product:
        """Overwrite every field of an existing product except its id."""

        with self._lock:
            index = self._index_of(product_id)
            product = Product.from_fields(product_id, fields)
            self._products[index] = product

        logger.info("Replaced product %s", product_id)
        return product

    def delete(self, product_id: str) -> None:
        with self._lock:
            del self._products[self._index_of(product_id)]

        logger.info("Deleted product %s", product_id)

    def clear(self) -> None:
        with self._lock:
            self._products.clear()


_store: ProductStore | None = None


def create_product_store(seed: bool) -> ProductStore:
    store = ProductStore()
    if seed:
        for fields in seed_products():
            store.create(fields)
    return store


def get_product_store() -> ProductStore:
    """Return the process-wide store, creating it on first use."""

    global _store
    if _store is None:
        _store = create_product_store(seed=settings.SEED_PRODUCTS)
        logger.info("Product store initialized with %d products", _store.count())
    return _store
