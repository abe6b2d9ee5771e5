"""
Central error rendering.

Every failure leaves the API as ``{"error": {"message": ..., "status": ...}}``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from utils.result import AppError, ErrorKind

logger = logging.getLogger(__name__)


def error_body(message: str, status_code: int) -> dict:
    return {"error": {"message": message, "status": status_code}}


def error_response(error: AppError) -> JSONResponse:
    """Translate a tagged ``AppError`` into its HTTP response."""
    return JSONResponse(
        status_code=error.status_code,
        content=error_body(error.message, error.status_code),
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"][1:]) or "body"
            for err in exc.errors()
        )
        code = 422
        return JSONResponse(
            status_code=code,
            content=error_body(f"Invalid request: {fields}", code),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        code = ErrorKind.UNKNOWN.status_code
        return JSONResponse(status_code=code, content=error_body(str(exc) or "Internal Server Error", code))
