"""
Request-scoped middleware: correlation id and timing headers.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def register_middleware(app: FastAPI) -> None:
    """Tag every response with a request id and its handling time."""

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        # caller-supplied id wins
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        level = logging.WARNING if response.status_code >= 500 else logging.DEBUG
        logger.log(
            level,
            "[%s] %s %s -> %d (%.3fs)",
            request_id, request.method, request.url.path, response.status_code, elapsed,
        )
        return response
