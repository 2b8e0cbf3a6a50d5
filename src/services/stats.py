"""Catalog statistics computed over a store snapshot."""

from __future__ import annotations

from collections.abc import Sequence

from src.models.product import Product, ProductStats


def category_histogram(products: Sequence[Product]) -> dict[str, int]:
    """Count products per category.

    Categories compare case-insensitively; each bucket is reported under the
    spelling seen first, and buckets keep first-seen order.
    """

    labels: dict[str, str] = {}
    counts: dict[str, int] = {}
    for product in products:
        key = product.category.casefold()
        label = labels.setdefault(key, product.category)
        counts[label] = counts.get(label, 0) + 1
    return counts


def compute_stats(products: Sequence[Product]) -> ProductStats:
    total = len(products)
    in_stock = sum(1 for p in products if p.in_stock)
    average_price = sum(p.price for p in products) / total if total else 0

    return ProductStats(
        total_products=total,
        categories=category_histogram(products),
        in_stock=in_stock,
        out_of_stock=total - in_stock,
        average_price=average_price,
    )
