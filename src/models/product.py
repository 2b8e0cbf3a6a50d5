"""Product domain models and API schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Base model exposing snake_case attributes as camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ProductFields(_CamelModel):
    """Business fields of a product; also the create/update request schema.

    Types are strict so loosely-typed JSON (``"12"`` for a price, ``1`` for
    a flag) is rejected instead of coerced.
    """

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(..., min_length=1)
    description: StrictStr = Field(..., min_length=1)
    price: float = Field(..., strict=True, gt=0, allow_inf_nan=False)
    category: StrictStr = Field(..., min_length=1)
    in_stock: StrictBool


class Product(ProductFields):
    """A stored product record."""

    id: str = Field(..., description="Unique identifier assigned at creation")

    @classmethod
    def from_fields(cls, product_id: str, fields: ProductFields) -> Product:
        return cls(id=product_id, **fields.model_dump())


class ProductPage(_CamelModel):
    """Response returned by GET /api/products."""

    total: int = Field(..., description="Number of products matching the filters")
    page: int
    limit: int
    data: list[Product] = Field(default_factory=list)


class ProductStats(_CamelModel):
    """Response returned by GET /api/products/stats."""

    total_products: int = 0
    categories: dict[str, int] = Field(default_factory=dict)
    in_stock: int = 0
    out_of_stock: int = 0
    average_price: float = 0
