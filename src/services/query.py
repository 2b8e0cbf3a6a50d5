"""Filtering and pagination of product listings."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from src.config import settings
from src.models.product import Product, ProductPage

DEFAULT_PAGE = 1

_LEADING_INT = re.compile(r"\s*[+-]?[0-9]+")


def _parse_leading_int(raw: str | None, default: int) -> int:
    """Read the integer a query value starts with, falling back to ``default``.

    Leading whitespace and a sign are allowed and trailing text is ignored,
    so ``"2abc"`` reads as 2. Values with no leading digits, and zero, are
    not errors; they use the default. Negative values are kept.
    """

    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    return int(match.group(0)) or default


@dataclass(frozen=True)
class ProductQuery:
    """Parsed listing parameters."""

    category: str | None = None
    search: str | None = None
    page: int = DEFAULT_PAGE
    limit: int = 10

    @classmethod
    def from_params(
        cls,
        *,
        category: str | None = None,
        search: str | None = None,
        page: str | None = None,
        limit: str | None = None,
    ) -> ProductQuery:
        return cls(
            category=category or None,
            search=search or None,
            page=_parse_leading_int(page, DEFAULT_PAGE),
            limit=_parse_leading_int(limit, settings.DEFAULT_PAGE_LIMIT),
        )


def filter_products(
    products: Sequence[Product],
    query: ProductQuery,
) -> list[Product]:
    """Apply the category match, then the name search."""

    result = list(products)

    if query.category:
        category = query.category.casefold()
        result = [p for p in result if p.category.casefold() == category]

    if query.search:
        term = query.search.casefold()
        result = [p for p in result if term in p.name.casefold()]

    return result


def paginate(products: Sequence[Product], page: int, limit: int) -> list[Product]:
    """Return the window ``[(page-1)*limit, page*limit)``.

    Windows that start before the first item or have no width are empty;
    negative bounds never wrap around to the end of the sequence.
    """

    start = (page - 1) * limit
    end = page * limit
    if start < 0 or end <= start:
        return []
    return list(products[start:end])


def query_products(products: Sequence[Product], query: ProductQuery) -> ProductPage:
    """Filter a store snapshot and cut out the requested page."""

    matched = filter_products(products, query)
    return ProductPage(
        total=len(matched),
        page=query.page,
        limit=query.limit,
        data=paginate(matched, query.page, query.limit),
    )
