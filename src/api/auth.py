"""Shared-secret check guarding the mutating product endpoints."""

from __future__ import annotations

import logging
import secrets

from fastapi import Request

from src.config import settings
from src.errors import UnauthorizedError

logger = logging.getLogger(__name__)


def require_api_key(request: Request) -> None:
    """FastAPI dependency rejecting requests without the configured API key."""

    provided = request.headers.get(settings.API_KEY_HEADER)
    if provided is None or not secrets.compare_digest(
        provided.encode("utf-8"),
        settings.API_KEY.encode("utf-8"),
    ):
        logger.warning(
            "Rejected %s %s: missing or invalid API key",
            request.method,
            request.url.path,
        )
        raise UnauthorizedError()
