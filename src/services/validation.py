"""Field rules applied to product payloads on create and update."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as SchemaError

from src.errors import ValidationError
from src.models.product import ProductFields

logger = logging.getLogger(__name__)

# JSON key -> label used in messages, in the order errors are reported
_TEXT_LABELS = {
    "name": "Name",
    "description": "Description",
    "category": "Category",
}
_FIELD_ORDER = ("name", "description", "price", "category", "inStock")


def _is_absent(error: dict[str, Any]) -> bool:
    return error["type"] == "missing" or error.get("input") is None


def _message_for(field: str, error: dict[str, Any]) -> str:
    """Map one pydantic error onto the message reported for ``field``."""

    if field in _TEXT_LABELS:
        label = _TEXT_LABELS[field]
        if _is_absent(error) or error["type"] == "string_too_short":
            return f"{label} is required"
        return f"{label} must be a string"
    if field == "price":
        if _is_absent(error):
            return "Price is required"
        return "Price must be a positive number"
    return "inStock must be a boolean"


def field_errors(exc: SchemaError) -> dict[str, str]:
    """Translate a schema failure into a ``{field: message}`` mapping."""

    errors: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else ""
        if field in _FIELD_ORDER and field not in errors:
            errors[field] = _message_for(field, error)
    return {key: errors[key] for key in _FIELD_ORDER if key in errors}


def collect_errors(payload: Any) -> dict[str, str]:
    """Return a mapping of field name to message for every rule violated.

    A payload that is not a JSON object is checked as if it were empty.
    """

    try:
        ProductFields.model_validate(payload if isinstance(payload, dict) else {})
    except SchemaError as exc:
        return field_errors(exc)
    return {}


def validate_product_payload(payload: Any) -> ProductFields:
    """Validate a decoded request body and build the product fields from it.

    Raises:
        ValidationError: If any rule fails; carries every violation.
    """

    try:
        fields = ProductFields.model_validate(
            payload if isinstance(payload, dict) else {}
        )
    except SchemaError as exc:
        errors = field_errors(exc)
        logger.info("Rejected product payload: %s", ", ".join(errors))
        raise ValidationError(errors) from exc

    # integers are accepted on the wire but stored as floats
    return fields.model_copy(update={"price": float(fields.price)})
