"""HTTP middleware shared by every route."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime

from fastapi import FastAPI, Request, Response

logger = logging.getLogger(__name__)


async def log_request(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log method and path of each request before it is processed."""

    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"

    logger.info(
        "[%s] %s %s",
        datetime.now(UTC).isoformat(),
        request.method,
        target,
        extra={"method": request.method, "path": request.url.path},
    )
    return await call_next(request)


def install_middleware(app: FastAPI) -> None:
    app.middleware("http")(log_request)
