"""Error taxonomy raised by handlers and translated by the API layer."""

from __future__ import annotations

from fastapi import status


class ApiError(Exception):
    """Base class for failures that map onto an HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ProductNotFoundError(ApiError):
    """Raised when no product carries the referenced id."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Product not found"

    def __init__(self, product_id: str) -> None:
        super().__init__()
        self.product_id = product_id


class ValidationError(ApiError):
    """Raised when a payload fails the product field rules."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"

    def __init__(
        self,
        errors: dict[str, str] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or {}


class UnauthorizedError(ApiError):
    """Raised when the shared-secret header is missing or wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized: Invalid API key"
